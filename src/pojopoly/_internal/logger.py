import logging

logger = logging.getLogger('pojopoly')
# libraries stay quiet unless the application configures logging
logger.addHandler(logging.NullHandler())

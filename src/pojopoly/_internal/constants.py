SUBTYPE_ID_ATTR = 'subtype_id'
# distinguishes "record has no such field" from a field which holds None
MISSING = object()

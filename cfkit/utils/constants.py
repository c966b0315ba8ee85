# Default column names
DEFAULT_USER_COL = "userID"
DEFAULT_ITEM_COL = "itemID"
DEFAULT_RATING_COL = "rating"
DEFAULT_TIMESTAMP_COL = "timestamp"

# Default column names for attribute (entity, attribute) pairs
DEFAULT_ENTITY_COL = "entityID"
DEFAULT_ATTRIBUTE_COL = "attributeID"

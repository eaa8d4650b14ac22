"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    NAME = "name"
    COST = "cost"
    AMOUNT_AVAILABLE = "amount_available"
    SELLER_ID = "seller_id"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

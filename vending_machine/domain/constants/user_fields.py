"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    HASHED_PASSWORD = "hashed_password"
    DEPOSIT = "deposit"
    ROLE = "role"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

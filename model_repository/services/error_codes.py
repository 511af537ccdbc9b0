"""Error codes reported by the catalogue services.

Each member's name is the stable machine-readable key handed to clients
(``messageKey``); its value is the human message. Messages ending in ``": "``
expect the offending value to be appended with :func:`describe`.
"""

from enum import Enum, unique


@unique
class SystemErrorCode(Enum):
    SYSTEM_NOT_FOUND_ID = "Failed to retrieve any System entities from the database with ID: "
    SYSTEM_NOT_FOUND_NAME = "Failed to retrieve any System entities from the database with Name: "
    NO_SYSTEMS_FOUND = "Failed to retrieve any System entities from the database."
    EXCEEDED_PAGE_LIMIT = "Failed to retrieve any System entities because page limit has been exceeded."
    DUPLICATE_SYSTEM = "There is already another System with the same Name and ID: "
    MANDATORY_FIELDS_MISSING = "Request contains one or more mandatory fields that are null. Operation aborted."
    INVALID_LOCATION_STRUCTURE = "A System may be provided either with a pair of coordinates or a virtual location."
    ERROR_ON_RETRIEVAL_ID = "Error detected while attempting to retrieve System with ID: "
    ERROR_ON_RETRIEVAL_NAME = "Error detected while attempting to retrieve System with Name: "
    ERROR_ON_RETRIEVAL_MANY = "Error detected while attempting to retrieve collection of Systems."
    ERROR_ON_CREATION = "Error detected while attempting to create System with Name: "
    ERROR_ON_UPDATE = "Error detected while attempting to update System with ID: "
    ERROR_ON_DELETION_ID = "Error detected while attempting to delete System with ID: "
    ERROR_ON_DELETION_MANY = "Error detected while attempting to delete collection of Systems."
    INVALID_PARAMETERS = "Operation aborted due to invalid input parameters."
    INVALID_PARAMETER_FORMAT = "Operation aborted due to invalid parameter format."
    IDENTIFIER_MISSING = "System identifier is missing or blank. Operation aborted."
    IDENTIFIER_NOT_UUID = "System identifier is not a valid UUID: "
    MISSING_DATA_INPUT = "No System data has been provided. Operation aborted."
    INTERNAL_SERVER_ERROR = "Internal Server Error."


@unique
class VendorErrorCode(Enum):
    VENDOR_NOT_FOUND_ID = "Failed to retrieve any Vendor entities from the database with ID: "
    VENDOR_NOT_FOUND_NAME = "Failed to retrieve any Vendor entities from the database with Name: "
    NO_VENDORS_FOUND = "Failed to retrieve any Vendor entities from the database."
    EXCEEDED_PAGE_LIMIT = "Failed to retrieve any Vendor entities because page limit has been exceeded."
    DUPLICATE_VENDOR = "There is already another Vendor with the same Name and ID: "
    MANDATORY_FIELDS_MISSING = "Request contains one or more mandatory fields that are null. Operation aborted."
    ERROR_ON_RETRIEVAL_ID = "Error detected while attempting to retrieve Vendor with ID: "
    ERROR_ON_RETRIEVAL_NAME = "Error detected while attempting to retrieve Vendor with Name: "
    ERROR_ON_RETRIEVAL_MANY = "Error detected while attempting to retrieve collection of Vendors."
    ERROR_ON_CREATION = "Error detected while attempting to create Vendor with Name: "
    ERROR_ON_UPDATE = "Error detected while attempting to update Vendor with ID: "
    ERROR_ON_DELETION_ID = "Error detected while attempting to delete Vendor with ID: "
    ERROR_ON_DELETION_MANY = "Error detected while attempting to delete collection of Vendors."
    INVALID_PARAMETERS = "Operation aborted due to invalid input parameters."
    INVALID_PARAMETER_FORMAT = "Operation aborted due to invalid parameter format."
    IDENTIFIER_MISSING = "Vendor identifier is missing or blank. Operation aborted."
    IDENTIFIER_NOT_UUID = "Vendor identifier is not a valid UUID: "
    MISSING_DATA_INPUT = "No Vendor data has been provided. Operation aborted."
    INTERNAL_SERVER_ERROR = "Internal Server Error."


@unique
class AssetCategoryErrorCode(Enum):
    ASSET_CATEGORY_NOT_FOUND_ID = "Failed to retrieve any Asset Category entities from the database with ID: "
    ASSET_CATEGORY_NOT_FOUND_NAME = "Failed to retrieve any Asset Category entities from the database with Name: "
    NO_ASSET_CATEGORIES_FOUND = "Failed to retrieve any Asset Category entities from the database."
    EXCEEDED_PAGE_LIMIT = "Failed to retrieve any Asset Category entities because page limit has been exceeded."
    DUPLICATE_ASSET_CATEGORY = "There is already another Asset Category with the same Name and ID: "
    MANDATORY_FIELDS_MISSING = "Request contains one or more mandatory fields that are null. Operation aborted."
    ERROR_ON_RETRIEVAL_ID = "Error detected while attempting to retrieve Asset Category with ID: "
    ERROR_ON_RETRIEVAL_NAME = "Error detected while attempting to retrieve Asset Category with Name: "
    ERROR_ON_RETRIEVAL_MANY = "Error detected while attempting to retrieve collection of Asset Categories."
    ERROR_ON_CREATION = "Error detected while attempting to create Asset Category with Name: "
    ERROR_ON_UPDATE = "Error detected while attempting to update Asset Category with ID: "
    ERROR_ON_DELETION_ID = "Error detected while attempting to delete Asset Category with ID: "
    ERROR_ON_DELETION_MANY = "Error detected while attempting to delete collection of Asset Categories."
    INVALID_PARAMETERS = "Operation aborted due to invalid input parameters."
    INVALID_PARAMETER_FORMAT = "Operation aborted due to invalid parameter format."
    IDENTIFIER_MISSING = "Asset Category identifier is missing or blank. Operation aborted."
    IDENTIFIER_NOT_UUID = "Asset Category identifier is not a valid UUID: "
    MISSING_DATA_INPUT = "No Asset Category data has been provided. Operation aborted."
    INTERNAL_SERVER_ERROR = "Internal Server Error."


def describe(error_code: Enum, value=None) -> str:
    """Render the message for ``error_code``, quoting ``value`` when given."""
    if value is None:
        return error_code.value
    return f"{error_code.value}'{value}'."

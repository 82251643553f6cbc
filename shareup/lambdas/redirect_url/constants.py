# Log event codes
MISSING_SHORT_ID = 'MISSING_SHORT_ID'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
DATABASE_ERROR = 'DATABASE_ERROR'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'

# Response messages
SHORT_URL_NOT_FOUND_MESSAGE = 'Short URL not found'
FAILED_TO_REDIRECT = 'Failed to redirect'

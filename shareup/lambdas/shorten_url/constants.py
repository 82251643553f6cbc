# Log event codes
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
INVALID_PUBLIC_URL = 'INVALID_PUBLIC_URL'
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
SHORT_ID_SPACE_EXHAUSTED = 'SHORT_ID_SPACE_EXHAUSTED'
DATABASE_ERROR = 'DATABASE_ERROR'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'

# Response messages
DATABASE_ERROR_MESSAGE = 'Database error'
FAILED_TO_CREATE_SHORT_URL = 'Failed to create short URL'

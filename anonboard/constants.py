VERSION = '1.0.0'

DATETIME_MS_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

# Replaces the text of a reply deleted by its author. The reply itself stays in the thread.
REPLY_DELETED_TEXT = '[deleted]'

RESULT_REPORTED = 'reported'
RESULT_SUCCESS = 'success'
RESULT_INCORRECT_PASSWORD = 'incorrect password'

OBJECT_ID_PATTERN = r'\A[0-9a-fA-F]{24}\Z'

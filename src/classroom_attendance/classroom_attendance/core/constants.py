"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_MYSQL_PORT = 3306

SUBMIT_CONFIRMATION = "Attendance recorded. Thank you!"
NULL_MARKER = "null"

LOGIN_SUCCESS_MESSAGE = "Login successful!"
LOGIN_FAILURE_MESSAGE = "Login failed."

DATABASE_URL = "DATABASE_URL"
TEST_DATABASE_URL = "TEST_DATABASE_URL"
LOG_LEVEL = "LOG_LEVEL"
PORT = "PORT"
CORS_ALLOWED_ORIGINS = "CORS_ALLOWED_ORIGINS"

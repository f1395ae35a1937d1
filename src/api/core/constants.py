API_VERSION_HEADER = "X-DonorHub-Version"

# JWT Configuration
JWT_ALGORITHM = "HS256"

# Bulk reconciliation limits
MAX_SYNC_DESIGNATIONS = 100
MAX_SYNC_QUESTIONS = 50

# Pagination
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 30

"""
Configuration constants for Gyazo Search.

This module contains the fixed settings including:
- Gyazo API endpoints and query parameter names
- Default page size, debounce window and request timeout
- Grid size choices for the web interface
"""

import os

# Gyazo API
API_BASE_URL = 'https://api.gyazo.com'
LIST_ENDPOINT = '/api/images'
SEARCH_ENDPOINT = '/api/search'

# The two endpoints name their page size parameter differently
LIST_PER_PAGE_PARAM = 'per_page'
SEARCH_PER_PAGE_PARAM = 'per'

# Results fetched per page (list and search)
DEFAULT_PER_PAGE = 20

# Quiescence window before a typed query is committed (milliseconds)
DEFAULT_DEBOUNCE_MS = 500

# Seconds before an API request is abandoned
DEFAULT_TIMEOUT = 10.0

# Grid item sizes offered in the GUI (label -> columns)
GRID_SIZES = {
    'Large': 3,
    'Medium': 5,
    'Small': 8,
}
DEFAULT_GRID_COLUMNS = 5

# Placeholder used wherever a request URL is shown
TOKEN_PLACEHOLDER = 'ACCESS_TOKEN_HIDDEN'

# User configuration location
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.gyazosearch')

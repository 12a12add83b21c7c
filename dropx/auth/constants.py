"""Dropbox OAuth constants."""

AUTHORIZE_URL = "https://www.dropbox.com/oauth2/authorize"
TOKEN_URL = "https://api.dropbox.com/oauth2/token"
API_URL = "https://api.dropboxapi.com/2"

CACHE_NAME = "dropx"

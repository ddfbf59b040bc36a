"""
Constants for the Flickr client library.
"""

# Permission levels accepted by the auth service
READ_PERM = "read"
WRITE_PERM = "write"
DELETE_PERM = "delete"
PERMS = (READ_PERM, WRITE_PERM, DELETE_PERM)

# Photo size suffixes used by static photo URLs
SIZE_SQUARE = "s"
SIZE_THUMBNAIL = "t"
SIZE_SMALL_240 = "m"
SIZE_MEDIUM_500 = "-"
SIZE_LARGE_1024 = "b"

# Name of the multipart part carrying the photo bytes
PHOTO_FIELD = "photo"

# Default configuration values
DEFAULT_CONFIG = {
    'api_host': 'www.flickr.com',
    'upload_url': 'http://api.flickr.com/services/upload/',
    'static_host': 'static.flickr.com',
}

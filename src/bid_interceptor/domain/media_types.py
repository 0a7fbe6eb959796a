"""Media type names used in ``mediaTypes`` / ``mediaType`` fields."""

BANNER = "banner"
VIDEO = "video"
NATIVE = "native"

ALL_MEDIA_TYPES = (BANNER, VIDEO, NATIVE)

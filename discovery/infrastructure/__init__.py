"""Discovery Infrastructure Layer."""

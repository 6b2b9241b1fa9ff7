"""Discovery Application Layer."""

SECONDS_PER_MINUTE = 60


def format_elapsed(seconds: int) -> str:
    """Format elapsed seconds as zero-padded ``MM:SS``."""
    minutes, secs = divmod(max(int(seconds), 0), SECONDS_PER_MINUTE)
    return f"{minutes:02d}:{secs:02d}"

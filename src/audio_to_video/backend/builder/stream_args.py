"""Stream argument helpers."""


def codec_flag(kind: str) -> tuple[str, ...]:
    """Return codec flag for a stream type."""
    return (f"-c:{kind}",)


def encode_with(kind: str, encoder: str) -> tuple[str, ...]:
    """Return args selecting ``encoder`` for a stream type."""
    return (*codec_flag(kind), encoder)

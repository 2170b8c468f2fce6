import logging

logger = logging.getLogger(__name__)


def write_text(output_path: str, content: str) -> None:
    """Write text to output_path, creating or truncating it."""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Wrote {output_path}")

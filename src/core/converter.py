import os
import logging
from typing import Optional, Tuple

from src.core.lister import list_entries, filter_csv_entries
from src.core.models import ConversionOutcome, RunContext, RunSummary
from src.core.row_parser import LineSplitter, naive_split, to_json
from src.core.writer import write_text

logger = logging.getLogger(__name__)


def output_path_for(name: str, output_dir: str) -> str:
    # Only an exact lower-case suffix is stripped, so a.csv and a.CSV never collide
    base_name = name[:-len(".csv")] if name.endswith(".csv") and name != ".csv" else name
    return os.path.join(output_dir, f"{base_name}.json")


def round_ms(elapsed_ms: float) -> float:
    return round(elapsed_ms * 1000) / 1000


def format_ms(elapsed_ms: float) -> str:
    # 12.500 -> "12.5", 12.000 -> "12"
    return f"{elapsed_ms:.3f}".rstrip("0").rstrip(".")


def format_summary(converted: int, elapsed_ms: float) -> str:
    plural = "" if converted == 1 else "s"
    return f"Converted {converted} file{plural} in {format_ms(elapsed_ms)}ms."


def convert_directory(
    input_dir: str,
    output_dir: str,
    context: Optional[RunContext] = None,
    splitter: LineSplitter = naive_split,
) -> Tuple[RunContext, RunSummary]:
    """
    Convert every CSV file in input_dir into a JSON file in output_dir.

    Files are processed one at a time in listing order. A failure while
    reading or writing one file is logged and the run moves on to the next
    file. A failure listing input_dir is not caught.

    Returns the run context together with a summary of the run.
    """
    if context is None:
        context = RunContext(input_dir=input_dir, output_dir=output_dir)
    else:
        # A context created before the directories were known
        context.input_dir = context.input_dir or input_dir
        context.output_dir = context.output_dir or output_dir

    csv_entries = filter_csv_entries(list_entries(input_dir))
    logger.info(f"Found {len(csv_entries)} CSV file(s) in {input_dir}")

    outcomes = []
    converted = 0
    for entry in csv_entries:
        output_path = output_path_for(entry.name, output_dir)
        try:
            content = to_json(entry.path, splitter)
            write_text(output_path, content)
            converted += 1
            outcomes.append(ConversionOutcome(name=entry.name, output_path=output_path, success=True))
        except Exception as e:
            logger.error(f"Conversion of {entry.name} failed with the following error:")
            logger.error(repr(e), exc_info=e)
            outcomes.append(ConversionOutcome(
                name=entry.name, output_path=output_path, success=False, error=str(e) or repr(e)
            ))

    elapsed_ms = round_ms(context.elapsed_ms())
    message = format_summary(converted, elapsed_ms)
    logger.info(message)
    return context, RunSummary(
        converted=converted,
        elapsed_ms=elapsed_ms,
        message=message,
        outcomes=outcomes,
    )

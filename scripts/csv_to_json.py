import sys
import os

# Add the project root directory to sys.path
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, ".."))
sys.path.insert(0, project_root)

from src.core.converter import convert_directory
from src.core.models import RunContext
from src.utils.config import load_config


def main():
    # Timing starts before config and logging are set up
    context = RunContext()
    config = load_config()
    _, summary = convert_directory(config["INPUT_DIR"], config["OUTPUT_DIR"], context=context)
    return summary


if __name__ == "__main__":
    main()

"""
Tag Cloud Generation Script.

This script:
1. Loads a text (or PDF) document
2. Counts case-insensitive word frequencies
3. Asks how many words the cloud should hold
4. Writes the alphabetized, frequency-scaled cloud as an HTML page

Any value not given on the command line is prompted for interactively.

Usage:
    python generate_cloud.py --input book.txt --count 100 --output cloud.html
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from config import SEPARATORS, LOG_LEVEL
from logger import setup_logging
from services.cloud_renderer import CloudRenderer
from services.document_loader import DocumentLoader
from services.errors import TagCloudError
from services.rank_selector import validate_count
from services.separator_set import SeparatorSet
from services.tag_cloud_generator import TagCloudGenerator

logger = logging.getLogger(__name__)


def prompt_count(unique_words: int, read: Callable[[str], str] = input) -> int:
    """
    Ask for the number of cloud words until a valid one is entered.
    
    Args:
        unique_words: Number of distinct words in the document
        read: Prompt function (defaults to input)
        
    Returns:
        An integer n with 1 <= n <= unique_words
    """
    answer = read(
        "Enter the number of words to include in the tag cloud "
        f"(a positive integer no greater than {unique_words}): "
    )
    while True:
        try:
            n = int(answer.strip())
        except ValueError:
            answer = read(f"ERROR: '{answer}' is not an integer. Enter a positive integer no greater than {unique_words}: ")
            continue
        
        validation = validate_count(n, unique_words)
        if validation.valid:
            return n
        answer = read(f"ERROR: invalid input. {validation.message}: ")


def write_cloud(html: str, output_path: str) -> None:
    """Write the rendered page, creating parent directories as needed."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")


def run(
    input_path: Optional[str],
    count: Optional[int],
    output_path: Optional[str],
    separators: str = SEPARATORS,
    read: Callable[[str], str] = input
) -> int:
    """
    Generate one tag cloud; returns the process exit code.
    
    Missing arguments are read through ``read``.
    """
    if not input_path:
        input_path = read("Enter the name of an input file: ").strip()
    
    loader = DocumentLoader()
    generator = TagCloudGenerator(separators=SeparatorSet.from_string(separators))
    renderer = CloudRenderer()
    
    try:
        document = loader.load_document(input_path)
    except TagCloudError as e:
        logger.error(f"Could not load input: {e}")
        return 1
    
    frequencies = generator.count_words(document.text)
    if not frequencies:
        print("The input file was empty, so no tag cloud could be generated.")
        return 1
    
    unique_words = len(frequencies)
    logger.info(f"Found {unique_words} unique words in {document.filename}")
    
    if count is None or not validate_count(count, unique_words).valid:
        if count is not None:
            print(f"ERROR: {count} is not valid for this document. {validate_count(count, unique_words).message}.")
        count = prompt_count(unique_words, read)
    
    if not output_path:
        output_path = read("Enter the name of an output HTML file: ").strip()
    
    try:
        cloud = generator.generate_from_frequencies(frequencies, count, document.filename)
        write_cloud(renderer.render(cloud), output_path)
    except TagCloudError as e:
        logger.error(f"Tag cloud generation failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not write {output_path}: {e}")
        return 1
    
    logger.info(f"Wrote tag cloud of {count} words to {output_path}")
    return 0


def main():
    """Main entry point for tag cloud generation."""
    parser = argparse.ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words in a document"
    )
    parser.add_argument(
        "--input",
        help="Input text or PDF file (prompted when omitted)"
    )
    parser.add_argument(
        "--count",
        type=int,
        help="Number of words in the cloud (prompted when omitted or invalid)"
    )
    parser.add_argument(
        "--output",
        help="Output HTML file (prompted when omitted)"
    )
    parser.add_argument(
        "--separators",
        default=SEPARATORS,
        help="Characters treated as word boundaries (default: whitespace and common punctuation)"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})"
    )
    
    args = parser.parse_args()
    setup_logging(args.log_level)
    
    try:
        exit_code = run(args.input, args.count, args.output, args.separators)
    except KeyboardInterrupt:
        logger.warning("Generation interrupted by user")
        sys.exit(1)
    except EOFError:
        logger.error("Input ended before all values were provided")
        sys.exit(1)
    
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

"""Sample-input catalogue for the utilkit demo command"""
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from utilkit.arrays import chunk, flatten, unique
from utilkit.config import Config
from utilkit.constants import SECTION_TITLES
from utilkit.exceptions import UtilKitError
from utilkit.formatters import (
    capitalize,
    days_between,
    format_date,
    is_valid_date,
    slugify,
    time_ago,
    to_datetime,
    truncate,
)
from utilkit.logging_config import get_logger
from utilkit.math_utils import (
    average,
    clamp,
    factorial,
    is_even,
    is_odd,
    lerp,
    round_to,
    sum_numbers,
)
from utilkit.validators import (
    is_alphanumeric,
    is_email,
    is_url,
    max_length,
    min_length,
)

logger = get_logger(__name__)

SAMPLE_DATE = datetime(2024, 3, 15, 14, 30, 45)

# (expression shown to the user, thunk producing the value)
Example = Tuple[str, Callable[[], Any]]


class ExampleResult(NamedTuple):
    """Outcome of evaluating one sample expression."""
    expression: str
    result: str
    failed: bool = False


def _date_examples(config: Config, now: datetime) -> List[Example]:
    pattern = config.date_pattern
    return [
        (f"format_date(SAMPLE, {pattern!r})", lambda: format_date(SAMPLE_DATE, pattern)),
        ("format_date(SAMPLE, 'M/D/YY')", lambda: format_date(SAMPLE_DATE, "M/D/YY")),
        ("format_date('2024-02-29', 'DD.MM.YYYY')", lambda: format_date("2024-02-29", "DD.MM.YYYY")),
        ("format_date('not-a-date', 'YYYY')", lambda: format_date("not-a-date", "YYYY")),
        ("is_valid_date('2024-01-15')", lambda: is_valid_date("2024-01-15")),
        ("is_valid_date({})", lambda: is_valid_date({})),
        ("time_ago(now - 5s)", lambda: time_ago(now - timedelta(seconds=5), now)),
        ("time_ago(now - 3min)", lambda: time_ago(now - timedelta(minutes=3), now)),
        ("time_ago(now - 1h)", lambda: time_ago(now - timedelta(hours=1), now)),
        ("time_ago(now - 45d)", lambda: time_ago(now - timedelta(days=45), now)),
        ("time_ago(now - 800d)", lambda: time_ago(now - timedelta(days=800), now)),
        ("time_ago(now + 2w)", lambda: time_ago(now + timedelta(weeks=2), now)),
        ("days_between('2024-01-01', '2024-03-01')", lambda: days_between("2024-01-01", "2024-03-01")),
        ("days_between(SAMPLE, SAMPLE)", lambda: days_between(SAMPLE_DATE, SAMPLE_DATE)),
    ]


def _string_examples(config: Config, now: datetime) -> List[Example]:
    return [
        ("is_email('user.name@example.com')", lambda: is_email("user.name@example.com")),
        ("is_email('user@localhost')", lambda: is_email("user@localhost")),
        ("is_url('https://www.example.com:8080/path')", lambda: is_url("https://www.example.com:8080/path")),
        ("is_url('mailto:user@example.com')", lambda: is_url("mailto:user@example.com")),
        ("is_alphanumeric('abc123')", lambda: is_alphanumeric("abc123")),
        ("is_alphanumeric('abc 123')", lambda: is_alphanumeric("abc 123")),
        ("min_length('secret', 8)", lambda: min_length("secret", 8)),
        ("max_length('secret', 8)", lambda: max_length("secret", 8)),
    ]


def _text_examples(config: Config, now: datetime) -> List[Example]:
    return [
        ("capitalize('hello wORLD')", lambda: capitalize("hello wORLD")),
        ("truncate('The quick brown fox', 10)", lambda: truncate("The quick brown fox", 10)),
        ("slugify('Hello, World!')", lambda: slugify("Hello, World!")),
        ("slugify('  --Multiple   Spaces--  ')", lambda: slugify("  --Multiple   Spaces--  ")),
    ]


def _array_examples(config: Config, now: datetime) -> List[Example]:
    size = config.chunk_size
    user_ids = [101, 102, 101, 103, 102, 104]
    categories = ["Electronics", ["Computers", ["Laptops", "Desktops"], "Phones"], "Books"]
    results = list(range(1, 11))
    return [
        ("unique([1, 2, 2, 3, 1, 4])", lambda: unique([1, 2, 2, 3, 1, 4])),
        ("unique(['a', 'b', 'a', 'c'])", lambda: unique(["a", "b", "a", "c"])),
        ("flatten([1, [2, [3, [4, [5]]]]])", lambda: flatten([1, [2, [3, [4, [5]]]]])),
        ("chunk([1, 2, 3, 4, 5], 2)", lambda: chunk([1, 2, 3, 4, 5], 2)),
        ("chunk([1, 2, 3], 0)", lambda: chunk([1, 2, 3], 0)),
        # Real-world use cases
        (f"unique(user_ids={user_ids})", lambda: unique(user_ids)),
        ("flatten(categories)", lambda: flatten(categories)),
        (f"chunk(search_results, {size})", lambda: chunk(results, size)),
    ]


def _number_examples(config: Config, now: datetime) -> List[Example]:
    return [
        ("clamp(15, 0, 10)", lambda: clamp(15, 0, 10)),
        ("clamp(5, 10, 0)", lambda: clamp(5, 10, 0)),
        ("lerp(0, 10, 0.25)", lambda: lerp(0, 10, 0.25)),
        ("round_to(2.5, 0)", lambda: round_to(2.5, 0)),
        ("round_to(3.14159, 2)", lambda: round_to(3.14159, 2)),
        ("is_even(4), is_odd(4)", lambda: (is_even(4), is_odd(4))),
        ("sum_numbers([1, 2, 3.5])", lambda: sum_numbers([1, 2, 3.5])),
        ("average([2, 4, 9])", lambda: average([2, 4, 9])),
        ("factorial(5)", lambda: factorial(5)),
    ]


SECTION_BUILDERS: Dict[str, Callable[[Config, datetime], List[Example]]] = {
    "dates": _date_examples,
    "strings": _string_examples,
    "text": _text_examples,
    "arrays": _array_examples,
    "numbers": _number_examples,
}


def resolve_reference_time(config: Config, now: Optional[datetime] = None) -> datetime:
    """Pick the reference instant for relative-time samples."""
    if config.reference_time is not None:
        reference = to_datetime(config.reference_time)
        if reference is not None:
            return reference
    return now if now is not None else datetime.now()


def evaluate(expression: str, thunk: Callable[[], Any]) -> ExampleResult:
    """Run one sample, turning argument-contract errors into a failed row."""
    try:
        value = thunk()
    except UtilKitError as e:
        logger.debug(f"{expression} raised {e}")
        return ExampleResult(expression, str(e), failed=True)
    return ExampleResult(expression, repr(value))


def collect_examples(config: Config, now: Optional[datetime] = None) -> Dict[str, List[ExampleResult]]:
    """
    Evaluate the sample expressions for every configured section.

    Args:
        config: Demo configuration
        now: Reference instant override (ignored when config.reference_time is set)

    Returns:
        Mapping of section name to evaluated rows, in config order
    """
    reference = resolve_reference_time(config, now)
    logger.info(f"Collecting examples for sections {config.sections}")

    collected = {}
    for section in config.sections:
        examples = SECTION_BUILDERS[section](config, reference)
        collected[section] = [evaluate(expression, thunk) for expression, thunk in examples]
        logger.debug(f"Section {section}: {len(examples)} examples")

    return collected


def display_examples(collected: Dict[str, List[ExampleResult]], console: Optional[Console] = None) -> None:
    """Render one table per section."""
    console = console or Console()

    for section, rows in collected.items():
        table = Table(title=SECTION_TITLES.get(section, section))
        table.add_column("Expression", style="cyan")
        table.add_column("Result")

        for row in rows:
            result = escape(row.result)
            if row.failed:
                result = f"[red]{result}[/red]"
            table.add_row(escape(row.expression), result)

        console.print(table)

"""Render roll results for output."""

from pydantic import TypeAdapter

from dicecore.models import DieKind, RollResult

_results_adapter = TypeAdapter(list[RollResult])


def format_results(results: list[RollResult], output_format: str = "debug") -> str:
    """Render results in the requested format.

    Args:
        results: Results in input order
        output_format: "debug", "json" or "text"

    Returns:
        Rendered output without trailing newline

    Raises:
        ValueError: If the format is unknown
    """
    if output_format == "debug":
        return repr(results)
    if output_format == "json":
        return _results_adapter.dump_json(results, indent=2).decode()
    if output_format == "text":
        return "\n".join(format_result_line(result) for result in results)
    raise ValueError(f"Unknown output format: {output_format}")


def format_result_line(result: RollResult) -> str:
    """Format one result as a human-readable line.

    Examples:
        "3d6: 2 + 4 + 1 = 7"
        "positive_to_negative: -4"
    """
    if isinstance(result.kind, DieKind):
        name = result.kind.label
    else:
        name = result.kind.shape.value

    if len(result.samples) == 1:
        return f"{name}: {result.roll_sum}"

    rolls_str = " + ".join(map(str, result.samples))
    return f"{name}: {rolls_str} = {result.roll_sum}"

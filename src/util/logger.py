import sys

from loguru import logger

PALETTE = {
    "bfs_solver": "green",
    "cli": "blue",
}

LEVEL_PER_COMPONENT = {
    "bfs_solver": "WARNING",
    "cli": "WARNING",
}


def set_component_level(component: str, level: str) -> None:
    LEVEL_PER_COMPONENT[component] = level


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "INFO")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    run = record["extra"].get("run", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    if run:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10} | {run:<10}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10}</> | "
            "<level>{message}</level>\n"
        )


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)

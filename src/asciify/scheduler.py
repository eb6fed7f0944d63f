"""Row scheduling for conversions.

Rows are independent, so they can run on a thread pool. Per-cell sampling is
mostly small numpy slices and Python arithmetic that hold the GIL, so the pool
gives little speed-up on CPython. Output is the same in either mode.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from loguru import logger


def schedule_rows(
    render_row: Callable[[int], str],
    height: int,
    parallel: bool = True,
    max_workers: int | None = None,
) -> list[str]:
    """Run ``render_row`` for every row index and return the rows in order.

    In parallel mode each row is a task on a thread pool. Results land in a
    slot per row index, so completion order never affects the output. If any
    row fails the whole call raises; no partial output is returned.
    """
    if not parallel or height == 1:
        logger.debug("Rendering {} rows sequentially", height)
        return [render_row(y) for y in range(height)]

    logger.debug("Rendering {} rows on a thread pool (max_workers={})", height, max_workers)
    rows: list[str | None] = [None] * height
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(render_row, y): y for y in range(height)}
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in pending:
            future.cancel()
        for future in done:
            exc = future.exception()
            if exc is not None:
                logger.debug("Row {} failed, aborting conversion", futures[future])
                raise exc
            rows[futures[future]] = future.result()
    return rows

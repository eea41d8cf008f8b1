"""Asynchronous token stream.

Wraps the synchronous scanner so async consumers (web sockets, SSE
handlers, terminal animations) can ``async for`` over tokens. The stream
adds no semantics: tokens, values and order are exactly those of
``tokenize()``. Pacing is optional and happens between tokens only.

Example:
    import asyncio
    from markityper import astream

    async def main() -> None:
        async for token in astream("# Hello *world*", delay=0.02):
            print(token.value, end="", flush=True)

    asyncio.run(main())

"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Mapping
from typing import Any

from markityper.config import ScanOptions
from markityper.lexer import Scanner
from markityper.segmenter import Segmenter
from markityper.tokens import Token


async def astream(
    source: str,
    options: ScanOptions | Mapping[str, Any] | None = None,
    *,
    segmenter: Segmenter | None = None,
    delay: float = 0.0,
) -> AsyncIterator[Token]:
    """Yield the tokens of ``source`` asynchronously.

    Args:
        source: Markdown source text
        options: Same as ``tokenize()``
        segmenter: Same as ``tokenize()``
        delay: Seconds to sleep after each token. 0 yields control to the
            event loop without waiting.

    Yields:
        Token objects, one per scanner step.

    Raises:
        ValueError: If delay is negative.
        ConfigError: If options has an unsupported type or value.
    """
    if delay < 0:
        raise ValueError(f"delay must be >= 0, got {delay!r}")

    scanner = Scanner(source, options, segmenter=segmenter)
    for token in scanner.tokenize():
        yield token
        await asyncio.sleep(delay)

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from builders import (
    ComposeOptions,
    DocumentBuilder,
    Fragment,
    MappingBuilder,
    SetBuilder,
    Trace,
)


def service_settings(
    name: str,
    port: int | None,
    overrides: dict[str, Any],
    builder: MappingBuilder,
) -> Iterator[Fragment[Any]]:
    yield builder.pair("name", name)
    yield builder.pair("workers", 2)
    if port is not None:
        yield builder.pair("port", port)
    # Overrides are declared last so they win.
    yield Fragment.Collection(overrides)


def readme(name: str, settings: dict[str, Any], tags: set[str]) -> str:
    doc = DocumentBuilder("sections")
    return doc.build(
        Fragment.Item(f"# {name}"),
        Fragment.Item(""),
        Fragment.Item("## Settings"),
        doc.each(sorted(settings.items()), lambda kv: Fragment.Item(f"- `{kv[0]}`: {kv[1]}")),
        Fragment.Item(""),
        doc.when(bool(tags), [Fragment.Item("## Tags"), Fragment.Item(", ".join(sorted(tags)))]),
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    trace = Trace()
    mapping = MappingBuilder(ComposeOptions(label="settings"), trace=trace)
    settings = mapping.compose(service_settings("api", 8080, {"workers": 8}, mapping))

    tags = SetBuilder().build(
        Fragment.Collection(["http", "public"]),
        Fragment.Item("http"),
        Fragment.Optional(None),
    )

    print(readme("api", settings, tags))
    print(f"\n{len(trace)} trace events")

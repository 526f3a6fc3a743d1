"""Encoding of persisted artifact documents.

Every artifact written by the filesystem adapter is a single YAML document with
the kind of strategy that produced it, the identifier it was written under, and
the embedded value:

```yaml
kind: string
identifier: .mesh/sources/api/schema
value: |-
  type Query {
    ...
```

Embedded text is emitted as a literal block when the emitter allows it and as a
quoted scalar otherwise, so strings containing backticks, `$`, quotes or trailing
whitespace survive a round trip exactly. Text holding the unicode line breaks NEL,
LS or PS is always double-quoted, since the parser folds them when written raw.
"""

import logging
from typing import Any

import yaml

from mesh_store.exceptions import ArtifactFormatError

__all__ = [
    "encode_document",
    "decode_document",
]

_LOGGER = logging.getLogger(__name__)

KIND = "kind"
IDENTIFIER = "identifier"
VALUE = "value"

UNICODE_LINE_BREAKS = ("\x85", "\u2028", "\u2029")


class _ArtifactDumper(yaml.SafeDumper):
    """Dumper that renders multi-line strings as literal blocks."""


def _str_style(data: str) -> str | None:
    # The parser folds these as line breaks unless escaped in double quotes
    if any(ch in data for ch in UNICODE_LINE_BREAKS):
        return '"'
    if "\n" in data:
        return "|"
    return None


def _str_presenter(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    """Represent multi-line yaml strings as you'd expect.

    See https://github.com/yaml/pyyaml/issues/240
    """
    return dumper.represent_scalar(
        "tag:yaml.org,2002:str", data, style=_str_style(data)
    )


_ArtifactDumper.add_representer(str, _str_presenter)


def encode_document(kind: str, identifier: str, value: Any) -> str:
    """Return the artifact document text for a value."""
    return yaml.dump(
        {KIND: kind, IDENTIFIER: identifier, VALUE: value},
        Dumper=_ArtifactDumper,
        sort_keys=False,
        allow_unicode=True,
        explicit_start=True,
    )


def decode_document(content: str, kind: str, identifier: str) -> Any:
    """Return the value embedded in an artifact document of the expected kind."""
    try:
        doc = yaml.safe_load(content)
    except yaml.YAMLError as err:
        raise ArtifactFormatError(
            f"Artifact {identifier} is not a valid document: {err}"
        ) from err
    if not isinstance(doc, dict) or VALUE not in doc:
        raise ArtifactFormatError(f"Artifact {identifier} is missing a value")
    if (doc_kind := doc.get(KIND)) != kind:
        raise ArtifactFormatError(
            f"Artifact {identifier} has kind '{doc_kind}' but expected '{kind}'"
        )
    if doc.get(IDENTIFIER) != identifier:
        _LOGGER.debug(
            "Artifact %s was written under identifier %s",
            identifier,
            doc.get(IDENTIFIER),
        )
    return doc[VALUE]

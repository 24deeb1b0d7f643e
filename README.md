# revide

A small library with two parts:

- `revide.lzstring` holds the LZ-String compression algorithm in its raw,
  UTF-16 and Base64 flavours.
- `revide.dump` sends the textual form of an LLVM module to a running viewer
  over HTTP.

## Installation

```
pip install .
```

## LZ-String

```python
from revide.lzstring import (
    compress, decompress,
    compress_to_utf16, decompress_from_utf16,
    compress_to_base64, decompress_from_base64,
)

packed = compress_to_base64("hello hello hello")
assert decompress_from_base64(packed) == "hello hello hello"

raw = compress("some text")              # 16 bits per output character
assert decompress(raw) == "some text"

safe = compress_to_utf16("some text")    # 15 bits per character, offset by 32, ends with a space
assert decompress_from_utf16(safe) == "some text"
```

Strings are handled as UTF-16 code units, so characters outside the Basic
Multilingual Plane are compressed as surrogate pairs and come back intact.

Compressing an empty string with `compress_to_utf16` or `compress_to_base64`
gives an empty string, and every decompressor returns an empty string when it
is given one. Base64 output is padded with `=` so that its length is a
multiple of four. Data that cannot be decoded makes the decompressors return
an empty string rather than raise.

## Sending a module to the viewer

```python
from revide.dump import build_dump_request, dump

request = build_dump_request(module_text, "after optimisation")
request.path          # "/llvm?type=module&title=after%20optimisation"
request.body          # module_text, UTF-8 encoded, then Base64 (bytes)
request.content_type  # "text/plain"

status = dump(module_text, "after optimisation", "localhost", 13337)
```

`build_dump_request` returns a frozen `DumpRequest` dataclass with `path`,
`body` and `content_type`. The title is URL-escaped in full and defaults to
an empty string.

`dump` sends that request as a POST to `host:port` (by default `localhost`
and `13337`, also available as `DEFAULT_HOST` and `DEFAULT_PORT`) and
returns the HTTP status code. Connection failures are raised as `OSError`.

## What this package does not do

It provides no viewer: nothing here listens for or displays the modules that
`dump` sends, and there is no command-line program. `dump` takes module text
that has already been printed; it does not read or produce LLVM modules
itself.

## Running the tests

```
pip install .[test]
pytest
```
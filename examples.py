#!/usr/bin/env python
"""
uniescape - Example usage for the uniescape library.
This file shows the escape notations, double-encode protection and the
transformer pipeline.
"""

from uniescape import (
    NOTATIONS,
    UniescapeTransformer,
    ValidationError,
    decode,
    encode,
    encode_hex_code_points,
    encode_named_html_entities,
    iter_tokens,
)

SAMPLE = "Caf" + chr(0xE9) + " & cr" + chr(0xE8) + "me " + chr(0x1F600)


def notation_examples():
    """Encode the same text in every notation and decode it back."""
    print("\n===== NOTATION EXAMPLES =====\n")
    print(f"Original text: {SAMPLE!r}")

    for key, notation in NOTATIONS.items():
        encoded = encode(SAMPLE, key)
        decoded = decode(encoded, key)
        status = "ok" if decoded == SAMPLE else "MISMATCH"
        print(f"{notation.title:<28} {encoded}  [{status}]")

    # U+ and 0x listings can be space separated
    print(f"\nSeparated 0x: {encode_hex_code_points('A' + chr(0x1F600) + 'B', separate=True)}")


def double_encode_examples():
    """Existing escapes are kept unless double_encode is set."""
    print("\n===== DOUBLE ENCODE EXAMPLES =====\n")

    text = "&copy; 2024 " + chr(0xA9) + " &foo;"
    print(f"Original text:        {text!r}")
    print(f"Encoded:              {encode_named_html_entities(text)}")
    print(f"Encoded (double):     {encode_named_html_entities(text, double_encode=True)}")

    print("\nTokens found in an HTML fragment:")
    for token in iter_tokens("&#x41;&#xD800;&#233;", "hex"):
        print(f"  {token.text:<10} valid={token.is_valid} decoded={token.decoded!r}")


def pipeline_examples():
    """Chain named transformers, with parameters."""
    print("\n===== PIPELINE EXAMPLES =====\n")

    pipeline = UniescapeTransformer()

    messy = "  Caf" + chr(0xE9) + chr(0x2014) + "cr" + chr(0xE8) + "me" + chr(0x200B) + "  "
    result = pipeline.transform(messy, ["trim_lines", "clean_text", "encode_named_entities"])
    print(f"Cleaned and encoded: {result}")

    result = pipeline.transform("one\n\n   \ntwo", ["remove_empty_lines"])
    print(f"Without blank lines: {result!r}")

    result = pipeline.transform("Hi!", [{"function": "encode_code_points", "separate": True}])
    print(f"Code points: {result}")

    result = pipeline.transform(SAMPLE, ["encode_js_escapes", "base64_encode"])
    print(f"JS escapes in Base64: {result}")

    try:
        pipeline.transform(SAMPLE, ["rot13"])
    except ValidationError as e:
        print(f"Expected error: {e}")


def main():
    """Main function to run all examples."""
    print("=" * 50)
    print("UNIESCAPE - EXAMPLES")
    print("=" * 50)

    notation_examples()
    double_encode_examples()
    pipeline_examples()

    print("\n" + "=" * 50)
    print("End of uniescape examples")
    print("=" * 50)


if __name__ == "__main__":
    main()

"""Destination key naming for translated documents."""

JSON_EXTENSION = ".json"
TRANSLATED_SUFFIX = "-translated.json"


def derive_output_key(source_key: str) -> str:
    """Derive the output object key from the source key.

    Every literal ".json" in the key is replaced, not only the final
    extension: "a.json.b.json" -> "a-translated.json.b-translated.json".
    The containment test ignores case while the replacement does not, so
    "notes.JSON" comes back unchanged.

    Keys without ".json" get the suffix appended: "input/hello" ->
    "input/hello-translated.json".
    """
    if JSON_EXTENSION in source_key.lower():
        return source_key.replace(JSON_EXTENSION, TRANSLATED_SUFFIX)
    return f"{source_key}{TRANSLATED_SUFFIX}"

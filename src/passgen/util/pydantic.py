import pydantic
import pydantic_core

CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/#model_type
    "model_type": "Input should be a valid mapping",
    "extra_forbidden": "Unknown policy field",
    "int_parsing": "Input should be a valid integer length",
    "int_type": "Input should be a valid integer length",
}


def convert_errors(
    ex: pydantic.ValidationError, custom_messages: dict[str, str] = CUSTOM_MESSAGES
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []
    for error in ex.errors(include_url=False, include_context=False):
        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message
        new_errors.append(error)
    return new_errors


def format_errors(errors: list[pydantic_core.ErrorDetails]) -> str:
    lines = []
    for error in errors:
        loc = ".".join(str(part) for part in error["loc"]) or "<root>"
        lines.append("%s: %s" % (loc, error["msg"]))
    return "\n".join(lines)

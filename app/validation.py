import re

# scheme, optional www., host, final label of 1-6 alphanumerics, then path/query/fragment
_URL_TAIL = r"(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b[-a-zA-Z0-9()@:%_+.~#?&/=]*"
URL_PATTERN = re.compile(rf"^https?://{_URL_TAIL}$")
DOMAIN_PATTERN = re.compile(rf"^{_URL_TAIL}$")
DIGITS = re.compile(r"[0-9]+")


class ValidationError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def parse_strict_integer(text: str) -> int | None:
    if text is None or not DIGITS.fullmatch(text):
        return None
    return int(text)


def normalize_url(text: str) -> str:
    url = text.strip()
    if url.startswith(("http://", "https://")):
        if not URL_PATTERN.match(url):
            raise ValidationError("Invalid URL format.")
        return url
    if not DOMAIN_PATTERN.match(url):
        raise ValidationError("Invalid domain format.")
    return f"https://{url}"


def clamp_take(min_value: int, max_value: int, value: int) -> int:
    if value < min_value or value > max_value:
        raise ValidationError(
            f"Invalid take argument value '{value}'. Should be between {min_value} and {max_value}."
        )
    return value


def clamp_skip(value: int) -> int:
    if value < 0:
        raise ValidationError(
            f"Invalid skip argument value '{value}'. Should be greater than or equal to 0."
        )
    return value

import re

# Текст из букв, цифр, пробелов и знаков !?\. , затем " #" и один тег
HASHTAG_POST_PATTERN = re.compile(r"[\w!?\\. ]* #[a-zA-Z0-9]+", re.ASCII)


def parse_post(raw: str) -> tuple[str, str]:
    """
    Делит текст поста на сообщение и хэштег.
    Если текст не подходит под шаблон, он возвращается как есть, а хэштег пустой.
    """
    if not HASHTAG_POST_PATTERN.fullmatch(raw):
        return raw, ""

    split_at = raw.index("#")
    return raw[:split_at].strip(), raw[split_at + 1:].strip()

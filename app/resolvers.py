import logging

import crud
import models
from context import Context
from validation import ValidationError, clamp_skip, clamp_take, normalize_url, parse_strict_integer

logger = logging.getLogger("hackernews.resolvers")

INFO = "This is the API of a Hackernews Clone"
FEED_TAKE_MIN = 1
FEED_TAKE_MAX = 50
FEED_TAKE_DEFAULT = 30
# largest key a 64-bit INTEGER column can hold
MAX_RECORD_ID = 2**63 - 1


def _parse_record_id(text: str) -> int | None:
    record_id = parse_strict_integer(text)
    if record_id is None or record_id > MAX_RECORD_ID:
        return None
    return record_id


def info() -> str:
    return INFO


def feed(
    ctx: Context,
    filter_needle: str | None = None,
    skip: int = 0,
    take: int = FEED_TAKE_DEFAULT,
) -> list[models.Link]:
    take = clamp_take(FEED_TAKE_MIN, FEED_TAKE_MAX, take)
    skip = clamp_skip(skip)
    if skip > MAX_RECORD_ID:
        raise ValidationError(
            f"Invalid skip argument value '{skip}'. Should be less than or equal to {MAX_RECORD_ID}."
        )
    return ctx.store.list_links(filter_needle, skip=skip, take=take)


def link(ctx: Context, id: str) -> models.Link | None:
    link_id = _parse_record_id(id)
    if link_id is None:
        return None
    return ctx.store.find_link_by_id(link_id)


def comment(ctx: Context, id: str) -> models.Comment | None:
    comment_id = _parse_record_id(id)
    if comment_id is None:
        return None
    return ctx.store.find_comment_by_id(comment_id)


def post_link(ctx: Context, url: str, description: str) -> models.Link:
    if not description:
        raise ValidationError("Cannot post link with empty description.")
    new_link = ctx.store.create_link(url=normalize_url(url), description=description)
    logger.info("Posted link id=%s url=%s", new_link.id, new_link.url)
    return new_link


def post_comment_on_link(ctx: Context, link_id: str, body: str) -> models.Comment:
    target_id = _parse_record_id(link_id)
    if target_id is None:
        raise ValidationError(f"Cannot post comment on non-existing link with id '{link_id}'")
    if not body:
        raise ValidationError("Cannot post empty comment.")
    try:
        new_comment = ctx.store.create_comment(body=body, link_id=target_id)
    except crud.ForeignKeyViolation:
        logger.warning("Rejected comment on missing link id=%s", target_id)
        raise ValidationError(f"Cannot post comment on non-existing link with id '{link_id}'.") from None
    logger.info("Posted comment id=%s on link id=%s", new_comment.id, target_id)
    return new_comment


def link_comments(ctx: Context, link: models.Link) -> list[models.Comment]:
    return ctx.store.list_comments_for_link(link.id)


def comment_link(ctx: Context, comment: models.Comment) -> models.Link:
    return ctx.store.find_link_of_comment(comment.link_id)

import models
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


class ForeignKeyViolation(Exception):
    def __init__(self, link_id: int):
        super().__init__(f"Link {link_id} does not exist")
        self.link_id = link_id


def _is_foreign_key_error(exc: IntegrityError) -> bool:
    # sqlite: "FOREIGN KEY constraint failed", postgres: "violates foreign key constraint"
    return "foreign key" in str(exc.orig).lower()


class RecordStore:
    def __init__(self, db: Session):
        self.db = db

    def create_link(self, url: str, description: str) -> models.Link:
        link = models.Link(url=url, description=description)
        self.db.add(link)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(link)
        return link

    def create_comment(self, body: str, link_id: int) -> models.Comment:
        comment = models.Comment(body=body, link_id=link_id)
        self.db.add(comment)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if _is_foreign_key_error(exc):
                raise ForeignKeyViolation(link_id) from exc
            raise
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(comment)
        return comment

    def find_link_by_id(self, link_id: int) -> models.Link | None:
        return self.db.query(models.Link).filter_by(id=link_id).first()

    def find_comment_by_id(self, comment_id: int) -> models.Comment | None:
        return self.db.query(models.Comment).filter_by(id=comment_id).first()

    def list_links(self, filter_text: str | None = None, skip: int = 0, take: int = 30) -> list[models.Link]:
        query = self.db.query(models.Link)
        if filter_text is not None:
            query = query.filter(
                or_(
                    models.Link.description.icontains(filter_text, autoescape=True),
                    models.Link.url.icontains(filter_text, autoescape=True),
                )
            )
        return (
            query
            .order_by(models.Link.created_at.desc(), models.Link.id.desc())
            .offset(skip)
            .limit(take)
            .all()
        )

    def list_comments_for_link(self, link_id: int) -> list[models.Comment]:
        return (
            self.db.query(models.Comment)
            .filter_by(link_id=link_id)
            .order_by(models.Comment.created_at.desc(), models.Comment.id.desc())
            .all()
        )

    def find_link_of_comment(self, link_id: int) -> models.Link:
        return self.db.query(models.Link).filter_by(id=link_id).one()

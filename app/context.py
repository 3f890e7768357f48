from dataclasses import dataclass

import crud
import database


@dataclass
class Context:
    store: crud.RecordStore


def get_context():
    db = database.SessionLocal()
    try:
        yield Context(store=crud.RecordStore(db))
    finally:
        db.close()

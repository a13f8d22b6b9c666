"""Database models for AfroPair using Peewee ORM."""

from datetime import datetime

from peewee import (
    CharField,
    Database,
    DatabaseProxy,
    DateTimeField,
    FloatField,
    Model,
    TextField,
)

# Unbound until a DatabaseManager binds the models to its own database.
db_proxy = DatabaseProxy()


class BaseModel(Model):
    """Base model with common fields."""

    class Meta:
        database = db_proxy


class TranslationRecordModel(BaseModel):
    """A persisted translation pair with its scoring detail."""

    id = CharField(max_length=36, primary_key=True)  # uuid4
    parent_id = CharField(max_length=36, index=True)  # pipeline run id
    src_lang = CharField(max_length=10, default="fr")
    tgt_lang = CharField(max_length=10, default="mos")
    src = TextField()
    tgt = TextField()
    confidence = FloatField()
    status = CharField(max_length=30, index=True)
    explanation = TextField()
    features_json = TextField()
    candidates_json = TextField()
    pipeline_version = CharField(max_length=50)
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "translation_records"


MODELS = [TranslationRecordModel]


def create_tables(db: Database) -> None:
    """Create all tables in ``db``."""
    with db.bind_ctx(MODELS):
        db.create_tables(MODELS, safe=True)

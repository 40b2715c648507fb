from extensions import db
from datetime import datetime
from sqlalchemy import JSON

# Primary key of the one and only profile row
PROFILE_ID = 1

# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())

class Profile(db.Model):
    __tablename__ = 'profiles'
    id = db.Column(db.Integer, primary_key=True, default=PROFILE_ID)
    hero = db.Column(SafeJSON, default=dict)  # {title, name, description, image}
    experience = db.Column(SafeJSON, default=list)  # [{title, date, location, description: [..]}]
    services = db.Column(SafeJSON, default=list)  # [{title, icon, description}]
    skills = db.Column(SafeJSON, default=list)
    contact = db.Column(SafeJSON, default=dict)  # {phone, email, location, whatsapp_link, instagram_link}
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

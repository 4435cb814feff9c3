from datetime import datetime

from passwordguard import db


class Role(db.Model):
    __tablename__ = "roles"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(63), unique=True, nullable=False, index=True)
    # NULL when the role has no password (created without one or cleared)
    password_hash = db.Column(db.String(255), nullable=True)
    login = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    settings = db.relationship(
        "RoleSetting",
        backref="role",
        cascade="all, delete-orphan",
        lazy="joined",
    )

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Role {self.name}>"

    @property
    def has_password(self) -> bool:
        return self.password_hash is not None

    def setting_overrides(self) -> dict:
        """Per-role policy overrides as {option: stored value}."""
        return {s.option: s.value for s in self.settings}

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "login": self.login,
            "has_password": self.has_password,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class RoleSetting(db.Model):
    """Per-role policy override (the ALTER ROLE ... SET equivalent)."""
    __tablename__ = "role_settings"

    id = db.Column(db.Integer, primary_key=True)
    role_id = db.Column(db.Integer, db.ForeignKey("roles.id", ondelete="CASCADE"), nullable=False, index=True)
    option = db.Column(db.String(63), nullable=False)
    value = db.Column(db.String(63), nullable=False)

    __table_args__ = (
        db.UniqueConstraint('role_id', 'option', name='uq_role_settings_role_option'),
    )

from golfteam.utils.clock import utcnow
from werkzeug.security import generate_password_hash, check_password_hash
from golfteam.extensions import db

USERS_TABLE = "users"

ADMIN = "Admin"
COACH = "Coach"
PARTNER = "Partner"
ATHLETE = "Athlete"

# Highest privilege first.
ROLE_NAMES = (ADMIN, COACH, PARTNER, ATHLETE)


class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    role_assignments = db.relationship(
        "UserRole", back_populates="user", cascade="all, delete-orphan", lazy="selectin"
    )

    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    @property
    def role_names(self):
        return {assignment.role for assignment in self.role_assignments}

    def __repr__(self):
        return f"<User {self.email}>"


class UserRole(db.Model):
    __tablename__ = "user_roles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role = db.Column(
        db.String(20),
        db.CheckConstraint("role IN ('Admin','Coach','Partner','Athlete')"),
        nullable=False,
    )
    assigned_at = db.Column(db.DateTime, default=utcnow)

    user = db.relationship("User", back_populates="role_assignments")

    __table_args__ = (
        db.UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )

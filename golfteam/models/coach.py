from golfteam.extensions import db


class Coach(db.Model):
    __tablename__ = "coaches"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30))
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True, index=True)
    version_id = db.Column(db.Integer, nullable=False)

    user = db.relationship("User")
    created_events = db.relationship("GolfEvent", back_populates="created_by_coach")

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Coach {self.id} {self.name}>"

from golfteam.extensions import db


class Partner(db.Model):
    __tablename__ = "partners"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30))

    # Linked login, if the partner registered themselves or was linked by an admin
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True, index=True)
    version_id = db.Column(db.Integer, nullable=False)

    user = db.relationship("User")
    athletes = db.relationship("Athlete", back_populates="partner", order_by="Athlete.id")
    entered_scores = db.relationship(
        "EventScore", back_populates="entered_by_partner", foreign_keys="EventScore.entered_by_partner_id"
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Partner {self.id} {self.name}>"

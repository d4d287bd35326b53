from golfteam.extensions import db


class Athlete(db.Model):
    __tablename__ = "athletes"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    picture_url = db.Column(db.String(255))

    # Ratings 0-5
    swing_rating = db.Column(db.Integer, db.CheckConstraint("swing_rating BETWEEN 0 AND 5"), nullable=False, default=0)
    power_rating = db.Column(db.Integer, db.CheckConstraint("power_rating BETWEEN 0 AND 5"), nullable=False, default=0)
    understanding_rating = db.Column(
        db.Integer, db.CheckConstraint("understanding_rating BETWEEN 0 AND 5"), nullable=False, default=0
    )

    partner_id = db.Column(db.Integer, db.ForeignKey("partners.id", ondelete="RESTRICT"), nullable=False, index=True)
    # Athletes might not have login accounts
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True, index=True)
    version_id = db.Column(db.Integer, nullable=False)

    partner = db.relationship("Partner", back_populates="athletes")
    user = db.relationship("User")
    event_scores = db.relationship("EventScore", back_populates="athlete", order_by="EventScore.timestamp")

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Athlete {self.id} {self.name}>"

from golfteam.utils.clock import utcnow
from golfteam.extensions import db


class EventScore(db.Model):
    __tablename__ = "event_scores"

    id = db.Column(db.Integer, primary_key=True)

    athlete_id = db.Column(db.Integer, db.ForeignKey("athletes.id", ondelete="CASCADE"), nullable=False, index=True)
    event_id = db.Column(db.Integer, db.ForeignKey("golf_events.id", ondelete="CASCADE"), nullable=False, index=True)
    entered_by_partner_id = db.Column(
        db.Integer, db.ForeignKey("partners.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    golf_score = db.Column(db.Integer, nullable=False)
    holes_completed = db.Column(
        db.Integer, db.CheckConstraint("holes_completed BETWEEN 1 AND 18"), nullable=False
    )
    # Set once at creation
    timestamp = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    version_id = db.Column(db.Integer, nullable=False)

    athlete = db.relationship("Athlete", back_populates="event_scores")
    event = db.relationship("GolfEvent", back_populates="event_scores")
    entered_by_partner = db.relationship(
        "Partner", back_populates="entered_scores", foreign_keys=[entered_by_partner_id]
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<EventScore {self.id} athlete={self.athlete_id} event={self.event_id}>"

from golfteam.extensions import db


class GolfEvent(db.Model):
    __tablename__ = "golf_events"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)

    event_date = db.Column(db.Date, nullable=False, index=True)
    start_time = db.Column(db.Time, nullable=False)
    end_time = db.Column(db.Time, nullable=False)
    location = db.Column(db.String(300), nullable=False)

    created_by_coach_id = db.Column(
        db.Integer, db.ForeignKey("coaches.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    version_id = db.Column(db.Integer, nullable=False)

    created_by_coach = db.relationship("Coach", back_populates="created_events")
    event_scores = db.relationship("EventScore", back_populates="event")

    __mapper_args__ = {"version_id_col": version_id}

    __table_args__ = (
        db.CheckConstraint("end_time > start_time", name="ck_golf_events_time_window"),
    )

    def __repr__(self):
        return f"<GolfEvent {self.id} {self.title}>"

from ..extensions import db

DEFAULT_AGE = 20
DEFAULT_MAJOR = "other"

class Member(db.Model):
    __tablename__ = "members"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    grade = db.Column(db.Integer, nullable=False)
    circle_id = db.Column(db.Integer, db.ForeignKey("circles.id", ondelete="CASCADE"))
    age = db.Column(db.Integer, nullable=False, default=DEFAULT_AGE,
                    server_default=db.text(str(DEFAULT_AGE)))
    major = db.Column(db.String(255), nullable=False, default=DEFAULT_MAJOR,
                      server_default=DEFAULT_MAJOR)

    circle = db.relationship("Circle", back_populates="members")

    def to_dict(self):
        return {"id": self.id, "name": self.name, "age": self.age,
                "grade": self.grade, "major": self.major}

    def __repr__(self):
        return f"<Member {self.id} {self.name!r}>"

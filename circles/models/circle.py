from ..extensions import db

class Circle(db.Model):
    __tablename__ = "circles"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    capacity = db.Column(db.Integer, nullable=False)   # advisory only, not enforced
    owner_id = db.Column(db.Integer, nullable=False)   # no FK on purpose

    members = db.relationship("Member", back_populates="circle",
                              cascade="all, delete-orphan", passive_deletes=True,
                              order_by="Member.id")

    @property
    def owner(self):
        for m in self.members:
            if m.id == self.owner_id:
                return m
        return None

    def __repr__(self):
        return f"<Circle {self.id} {self.name!r}>"

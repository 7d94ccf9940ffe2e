import logging

from flask import request, jsonify, abort
from werkzeug.exceptions import HTTPException
from ... import __version__
from ...extensions import db
from ...models import Circle, Member
from . import bp

log = logging.getLogger(__name__)

# columns are 32-bit INT
INT_MIN, INT_MAX = -2**31, 2**31 - 1

@bp.errorhandler(HTTPException)
def json_error(e):
    return jsonify(error=e.description), e.code

def _body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data

def _str_field(data, key, required=True):
    value = data.get(key)
    if value is None and not required:
        return None
    if not isinstance(value, str) or not value.strip():
        abort(400, description=f"{key} must be a non-empty string")
    return value.strip()

def _int_field(data, key, required=True):
    value = data.get(key)
    if value is None and not required:
        return None
    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        abort(400, description=f"{key} must be an integer")
    if not INT_MIN <= value <= INT_MAX:
        abort(400, description=f"{key} is out of range")
    return value

def _get_circle(circle_id):
    c = db.session.get(Circle, circle_id)
    if c is None:
        abort(404, description="Circle not found")
    return c

@bp.get("/")
def version():
    return __version__, 200, {"Content-Type": "text/plain; charset=utf-8"}

@bp.post("/circle")
def create_circle():
    data = _body()
    circle_name = _str_field(data, "circle_name")
    capacity = _int_field(data, "capacity")
    owner_name = _str_field(data, "owner_name")
    owner_age = _int_field(data, "owner_age")
    owner_grade = _int_field(data, "owner_grade")
    owner_major = _str_field(data, "owner_major")

    # owner_id is NOT NULL but only known once the owner row exists
    circle = Circle(name=circle_name, capacity=capacity, owner_id=0)
    db.session.add(circle)
    db.session.flush()
    owner = Member(name=owner_name, age=owner_age, grade=owner_grade,
                   major=owner_major, circle_id=circle.id)
    db.session.add(owner)
    db.session.flush()
    circle.owner_id = owner.id
    db.session.commit()

    log.info("created circle %s owned by member %s", circle.id, owner.id)
    return jsonify(circle_id=circle.id, owner_id=owner.id)

@bp.get("/circle/<int:circle_id>")
def fetch_circle(circle_id):
    c = _get_circle(circle_id)
    owner = c.owner
    return jsonify(
        circle_id=c.id,
        circle_name=c.name,
        capacity=c.capacity,
        owner=owner.to_dict() if owner else None,
        members=[m.to_dict() for m in c.members if m.id != c.owner_id],
    )

@bp.put("/circle/<int:circle_id>")
def update_circle(circle_id):
    c = _get_circle(circle_id)
    data = _body()
    name = _str_field(data, "circle_name", required=False)
    capacity = _int_field(data, "capacity", required=False)
    if name is not None:
        c.name = name
    if capacity is not None:
        c.capacity = capacity
    db.session.commit()
    log.debug("updated circle %s", c.id)
    return jsonify(id=c.id)

@bp.delete("/circle/<int:circle_id>")
def delete_circle(circle_id):
    c = _get_circle(circle_id)
    db.session.delete(c); db.session.commit()
    log.info("deleted circle %s and its members", circle_id)
    return "", 204

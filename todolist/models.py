from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

STATUS_FILTERS = ('all', 'completed', 'incomplete')


class Task(db.Model):
    __tablename__ = 'tasks'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, default='')
    completed = db.Column(db.Boolean, nullable=False, default=False)
    due_date = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, default=db.func.current_timestamp(),
                           onupdate=db.func.current_timestamp())

    def __repr__(self):
        return f'<Task {self.id} {self.title!r}>'

    @property
    def dom_id(self):
        return f'task_{self.id}'

    def toggle_complete(self):
        self.completed = not self.completed
        return self.completed

    def matches(self, status):
        """Whether the task belongs in a listing filtered by ``status``."""
        if status == 'completed':
            return bool(self.completed)
        if status == 'incomplete':
            return not self.completed
        return True

    @classmethod
    def filtered(cls, status='all'):
        """Query for the tasks matching a listing filter, oldest first.

        Unknown filters fall back to ``all``.
        """
        query = cls.query
        if status == 'completed':
            query = query.filter_by(completed=True)
        elif status == 'incomplete':
            query = query.filter_by(completed=False)
        return query.order_by(cls.id)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description or '',
            'completed': self.completed,
            'due_date': _isoformat(self.due_date),
            'created_at': _isoformat(self.created_at),
            'updated_at': _isoformat(self.updated_at),
        }


def _isoformat(value):
    return value.isoformat() if value else None


def normalize_status(value):
    return value if value in STATUS_FILTERS else 'all'

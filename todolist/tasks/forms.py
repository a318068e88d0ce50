from pydantic import ValidationError
from werkzeug.datastructures import MultiDict

from todolist.tasks.schemas import DUE_DATE_MESSAGE, TaskCreate, TaskUpdate

MESSAGES = {
    'title': 'Title is required',
    'completed': 'Completed must be checked or unchecked',
    'due_date': DUE_DATE_MESSAGE,
}


def errors_by_field(exc):
    errors = {}
    for error in exc.errors():
        field = error['loc'][0] if error['loc'] else '__all__'
        errors.setdefault(field, MESSAGES.get(field, error['msg']))
    return errors


class TaskForm:
    """Submitted task fields, validated through the pydantic schemas.

    On an update only fields present in the submission end up in ``data``,
    so anything the client did not send stays untouched.
    """

    def __init__(self, formdata=None, task=None):
        self.formdata = formdata if formdata is not None else MultiDict()
        self.task = task
        self.data = {}
        self.errors = {}

    def validate(self, partial=False):
        schema = TaskUpdate if partial else TaskCreate
        try:
            parsed = schema.model_validate(self.formdata)
        except ValidationError as exc:
            self.errors = errors_by_field(exc)
            return False
        self.data = parsed.model_dump(exclude_unset=partial)
        return True

    def apply(self, task):
        for field, value in self.data.items():
            setattr(task, field, value)
        return task

    def value(self, field):
        """Value to show in the rendered form: submitted, then stored."""
        if field in self.formdata:
            values = self.formdata.getlist(field)
            return values[-1] if values else ''
        if self.task is not None:
            stored = getattr(self.task, field)
            if field == 'due_date':
                return stored.strftime('%Y-%m-%dT%H:%M') if stored else ''
            return stored if stored is not None else ''
        return False if field == 'completed' else ''

    def checked(self):
        value = self.value('completed')
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {'1', 'true', 'on', 'yes'}

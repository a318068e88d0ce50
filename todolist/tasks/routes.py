import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for

from todolist.models import db, Task, normalize_status
from todolist.streams import ResponseMode, append, remove, replace, stream_response
from todolist.tasks.forms import TaskForm

log = logging.getLogger(__name__)

tasks = Blueprint('tasks', __name__, url_prefix='/tasks')


def _render_row(task):
    return render_template('tasks/_task.html', task=task)


def _back_to_list(status=None):
    status = normalize_status(status or request.args.get('status'))
    if status == 'all':
        return redirect(url_for('tasks.index'), code=303)
    return redirect(url_for('tasks.index', status=status), code=303)


@tasks.route('', methods=['GET'])
def index():
    status = normalize_status(request.args.get('status'))
    task_list = Task.filtered(status).all()

    # filter links navigate inside the tasks_list frame
    if request.headers.get('Turbo-Frame'):
        return render_template('tasks/_list.html', tasks=task_list, status=status,
                               form=TaskForm())
    return render_template('tasks/index.html', tasks=task_list, status=status,
                           form=TaskForm())


@tasks.route('/new', methods=['GET'])
def new():
    return render_template('tasks/new.html', form=TaskForm())


@tasks.route('', methods=['POST'])
def create():
    # the inline form carries the filter the list frame is showing
    status = normalize_status(request.form.get('status'))
    form = TaskForm(request.form)
    if not form.validate():
        log.info('rejected new task: %s', form.errors)
        return render_template('tasks/new.html', form=form), 422

    task = form.apply(Task())
    db.session.add(task)
    db.session.commit()
    log.info('created task %s', task.id)

    if ResponseMode.from_request() is ResponseMode.STREAM:
        actions = []
        if task.matches(status):
            actions.append(append('tasks', _render_row(task)))
        actions.append(replace('new_task', render_template(
            'tasks/_new_task.html', form=TaskForm(), status=status)))
        return stream_response(*actions)
    flash('Task was successfully created.')
    return _back_to_list(status)


@tasks.route('/<int:task_id>', methods=['GET'])
def show(task_id):
    task = db.get_or_404(Task, task_id)
    return render_template('tasks/show.html', task=task)


@tasks.route('/<int:task_id>/edit', methods=['GET'])
def edit(task_id):
    task = db.get_or_404(Task, task_id)
    return render_template('tasks/edit.html', task=task, form=TaskForm(task=task))


@tasks.route('/<int:task_id>', methods=['PATCH', 'PUT'])
def update(task_id):
    task = db.get_or_404(Task, task_id)
    form = TaskForm(request.form, task)
    if not form.validate(partial=True):
        log.info('rejected update of task %s: %s', task_id, form.errors)
        return render_template('tasks/edit.html', task=task, form=form), 422

    form.apply(task)
    db.session.commit()
    log.info('updated task %s', task.id)

    if ResponseMode.from_request() is ResponseMode.STREAM:
        return stream_response(replace(task.dom_id, _render_row(task)))
    flash('Task was successfully updated.')
    return _back_to_list()


@tasks.route('/<int:task_id>/toggle_complete', methods=['PATCH'])
def toggle_complete(task_id):
    task = db.get_or_404(Task, task_id)
    task.toggle_complete()
    db.session.commit()
    log.info('toggled task %s, completed=%s', task.id, task.completed)

    if ResponseMode.from_request() is ResponseMode.STREAM:
        return stream_response(replace(task.dom_id, _render_row(task)))
    return _back_to_list()


@tasks.route('/<int:task_id>', methods=['DELETE'])
def destroy(task_id):
    task = db.get_or_404(Task, task_id)
    dom_id = task.dom_id
    db.session.delete(task)
    db.session.commit()
    log.info('deleted task %s', task_id)

    if ResponseMode.from_request() is ResponseMode.STREAM:
        return stream_response(remove(dom_id))
    flash('Task was successfully destroyed.')
    return _back_to_list()

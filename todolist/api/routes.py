from flask import Blueprint, jsonify, request

from todolist.models import db, Task, normalize_status

api = Blueprint('api', __name__, url_prefix='/api')


@api.route('/tasks', methods=['GET'])
def list_tasks():
    status = normalize_status(request.args.get('status'))
    return jsonify({'status': status,
                    'tasks': [task.to_dict() for task in Task.filtered(status)]})


@api.route('/tasks/<int:task_id>', methods=['GET'])
def get_task(task_id):
    task = db.get_or_404(Task, task_id)
    return jsonify(task.to_dict())

from flask import Blueprint, jsonify, redirect, render_template, request, url_for

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return redirect(url_for('tasks.index'))


@main.app_errorhandler(404)
def not_found(error):
    if request.path.startswith('/api/'):
        # only a matched task lookup knows the missing thing is a task
        message = 'Task not found' if request.endpoint == 'api.get_task' else 'Not found'
        return jsonify({'error': message}), 404
    return render_template('errors/404.html'), 404

from flask import Flask

from todolist.api.routes import api
from todolist.config import load_config
from todolist.logging_setup import setup_logging
from todolist.main.routes import main
from todolist.middleware import MethodOverrideMiddleware
from todolist.models import db
from todolist.tasks.routes import tasks


def create_app(config_overrides=None):
    app = Flask(__name__, template_folder='todolist/templates',
                static_folder='todolist/static')

    app.config.from_mapping(load_config(app.root_path))
    if config_overrides:
        app.config.from_mapping(config_overrides)

    setup_logging(app.config['LOG_LEVEL'])

    app.register_blueprint(api)
    app.register_blueprint(main)
    app.register_blueprint(tasks)

    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    db.init_app(app)

    with app.app_context():
        db.create_all()
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True)

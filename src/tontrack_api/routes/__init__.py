from flask_smorest import Api

from .state import blueprint as state_blueprint
from .settings import blueprint as settings_blueprint
from .overlay import blueprint as overlay_blueprint
from .terrors import blueprint as terrors_blueprint


def register_routes(api: Api) -> None:
    api.register_blueprint(state_blueprint)
    api.register_blueprint(settings_blueprint)
    api.register_blueprint(overlay_blueprint)
    api.register_blueprint(terrors_blueprint)

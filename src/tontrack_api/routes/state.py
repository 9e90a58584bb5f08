from flask.views import MethodView
from flask_smorest import Blueprint
from typing import Dict, Any

from tontrack_api.helper import abort_on_error, get_controller

blueprint = Blueprint('state', 'state', url_prefix='/state', description='Current monitor state')


@blueprint.route('')
class State(MethodView):
    @blueprint.response(200, description="Settings, code history, stats and the current round")
    def get(self) -> Dict[str, Any]:
        with abort_on_error():
            snapshot = get_controller().get_state()

        return snapshot.to_dict()

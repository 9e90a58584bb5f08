from flask.views import MethodView
from flask_smorest import Blueprint
from marshmallow import Schema, fields
from typing import Dict, Any

from tontrack_api.helper import get_controller

DEFAULT_ROUND_TYPE = "Classic"


class RoundTypeSchema(Schema):
    round_type = fields.Str(load_default=DEFAULT_ROUND_TYPE)


class TerrorLookupSchema(Schema):
    killer_ids = fields.List(fields.Int(), required=True)
    round_type = fields.Str(load_default=DEFAULT_ROUND_TYPE)


blueprint = Blueprint('terrors', 'terrors', url_prefix='/terrors', description='Terror information')


@blueprint.route('/<int:killer_id>')
class Terror(MethodView):
    @blueprint.arguments(RoundTypeSchema, location="query")
    @blueprint.response(200, description="Name, color and abilities of a terror")
    def get(self, args: Dict[str, Any], killer_id: int) -> Dict[str, Any]:
        info = get_controller().get_terror_info(killer_id, args['round_type'])
        return info.to_dict()


@blueprint.route('/lookup')
class TerrorLookup(MethodView):
    @blueprint.arguments(TerrorLookupSchema, location="json")
    @blueprint.response(200, description="Look up several terrors of one round")
    def post(self, args: Dict[str, Any]) -> Dict[str, Any]:
        infos = get_controller().get_terrors_info(args['killer_ids'], args['round_type'])
        return {
            "round_type": args['round_type'],
            "terrors": [info.to_dict() for info in infos],
        }

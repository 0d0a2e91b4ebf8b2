import logging

from elastic_transport import TransportError
from elasticsearch import ApiError, Elasticsearch
from flask import Flask, jsonify, request
from flask_cors import CORS

from address_autocomplete import indexer
from address_autocomplete.config import Config

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"error": "Internal Server Error"}


def create_app(config: Config, es: Elasticsearch) -> Flask:
  """create the Flask app serving the autocomplete endpoint

  Args:
      config (Config): startup configuration
      es (Elasticsearch): client shared by every request
  """
  app = Flask(__name__)
  CORS(app)
  # to keep the field order of addresses when passing to the frontend
  app.json.sort_keys = False

  @app.route('/')
  def index():
    return 'OK', 200, {'Content-Type': 'text/plain; charset=utf-8'}

  @app.route('/autocomplete', methods=['GET'])
  def autocomplete():
    q = request.args.get('q', '')
    location = indexer.parse_location(request.args.get('lat'), request.args.get('lon'))
    try:
      results = indexer.autocomplete_search(es, config.es_index, q, location)
    except (ApiError, TransportError):
      logger.exception("autocomplete search failed for q=%r", q)
      return jsonify(INTERNAL_ERROR), 500
    return jsonify(results)

  @app.errorhandler(500)
  def internal_error(error):
    return jsonify(INTERNAL_ERROR), 500

  return app

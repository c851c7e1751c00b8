import json
import math

from flask import Flask, request
from prometheus_client import CollectorRegistry, generate_latest, CONTENT_TYPE_LATEST

from workload_estimator import log
from workload_estimator.estimate.estimator import Estimator, NotFoundError, get_key
from workload_estimator.model.usage_sample import CPU, MEMORY, GPU

JSON_HEADERS = {'Content-Type': 'application/json'}


def create_app(estimator: Estimator, registry: CollectorRegistry) -> Flask:
    app = Flask(__name__)

    @app.route('/health')
    def health():
        return 'ok'

    @app.route('/metrics')
    def metrics():
        return generate_latest(registry), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    @app.route('/usage/<namespace>/<group_name>', methods=['POST'])
    def record_usage(namespace, group_name):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return json.dumps({'error': 'expected a JSON object'}), 400, JSON_HEADERS

        try:
            cpu = float(body[CPU])
            memory = float(body[MEMORY])
            gpu = float(body.get(GPU, 0))
            if not all(math.isfinite(v) for v in (cpu, memory, gpu)):
                raise ValueError("usage must be finite")
        except (KeyError, TypeError, ValueError):
            log.warning("Malformed usage for group: '%s': %s", get_key(namespace, group_name), body)
            return json.dumps({'error': "'{}' and '{}' must be numbers".format(CPU, MEMORY)}), 400, JSON_HEADERS

        estimator.record_usage(namespace, group_name, cpu, memory, gpu)
        return json.dumps({'group': get_key(namespace, group_name)}), 200, JSON_HEADERS

    @app.route('/estimate/<namespace>/<group_name>')
    def estimate(namespace, group_name):
        try:
            return json.dumps(estimator.estimate_resources(namespace, group_name)), 200, JSON_HEADERS
        except NotFoundError as e:
            return json.dumps({'error': str(e)}), 404, JSON_HEADERS

    @app.route('/history/<namespace>/<group_name>')
    def history(namespace, group_name):
        snapshot, found = estimator.get_history(namespace, group_name)
        if not found:
            return json.dumps({'unknown_group': get_key(namespace, group_name)}), 404, JSON_HEADERS

        return json.dumps(snapshot.to_dict()), 200, JSON_HEADERS

    return app

#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Simula AWS Lambda + API Gateway localmente usando Flask

Pré-requisitos:
    - Dependências instaladas: pip install -e "."
    - WEATHER_API_KEY no ambiente (ou header X-Weather-Api-Key em cada request)

Como usar:
    cd lambda
    python local_server.py

Endpoints disponíveis:
    GET http://localhost:8000/api/weather?location=Medellín
    GET http://localhost:8000/api/weather/coordinates?lat=6.2442&lng=-75.5812
    GET http://localhost:8000/health
"""
import json
import os
import sys
from datetime import datetime

from flask import Flask, request, jsonify
from flask_cors import CORS

# Garantir que o diretório lambda está no path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lambda_function import lambda_handler

app = Flask(__name__)
# CORS liberado para o front rodando em outra porta (desenvolvimento local)
CORS(app, resources={r"/api/*": {"origins": "*"}})


class MockLambdaContext:
    """Mock do contexto Lambda para testes locais"""
    def __init__(self):
        self.aws_request_id = f"local-{datetime.now().timestamp()}"
        self.function_name = "local-weather-current"
        self.function_version = "$LATEST"
        self.invoked_function_arn = "arn:aws:lambda:local:000000000000:function:local-weather-current"
        self.memory_limit_in_mb = "256"
        self.log_group_name = "/aws/lambda/local-weather-current"
        self.log_stream_name = "local"

    def get_remaining_time_in_millis(self):
        return 30000


def flask_to_lambda_event(flask_request) -> dict:
    """Converte requisição Flask para evento Lambda/API Gateway"""
    query_string_parameters = dict(flask_request.args.items())

    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': dict(flask_request.headers.items()),
        'queryStringParameters': query_string_parameters or None,
        'body': flask_request.data.decode('utf-8') if flask_request.data else None,
        'isBase64Encoded': False,
        'requestContext': {
            'stage': 'local',
            'requestId': f"local-{datetime.now().timestamp()}",
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'identity': {
                'sourceIp': flask_request.remote_addr,
                'userAgent': flask_request.headers.get('User-Agent', '')
            }
        }
    }


def lambda_to_flask_response(lambda_response: dict):
    """Converte resposta Lambda para resposta Flask"""
    status_code = lambda_response.get('statusCode', 200)
    headers = lambda_response.get('headers', {}) or {}
    body = lambda_response.get('body', '')

    try:
        body_dict = json.loads(body) if isinstance(body, str) else body
        return jsonify(body_dict), status_code, headers
    except (json.JSONDecodeError, TypeError):
        return body, status_code, headers


@app.route('/api/weather', methods=['GET'])
@app.route('/api/weather/coordinates', methods=['GET'])
@app.route('/health', methods=['GET'])
def proxy_to_lambda():
    """Encaminha a requisição para o lambda_handler"""
    event = flask_to_lambda_event(request)
    response = lambda_handler(event, MockLambdaContext())
    return lambda_to_flask_response(response)


@app.errorhandler(404)
def not_found(error):
    """Handler para rotas não encontradas"""
    return jsonify({
        'error': 'Not Found',
        'message': f"Route {request.path} not found",
        'available_routes': [
            'GET /api/weather?location=<text>',
            'GET /api/weather/coordinates?lat=<lat>&lng=<lng>',
            'GET /health'
        ]
    }), 404


if __name__ == '__main__':
    if not os.environ.get('WEATHER_API_KEY'):
        print("⚠️  AVISO: WEATHER_API_KEY não definida - envie o header X-Weather-Api-Key\n")

    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '0.0.0.0')

    print("=" * 70)
    print("🚀 Servidor Local - Weather Current API")
    print("=" * 70)
    print(f"\n📍 Rodando em: http://{host}:{port}")
    print("\n💡 Exemplo de uso:")
    print(f"   curl 'http://localhost:{port}/api/weather?location=Medellín'")
    print("\n" + "=" * 70 + "\n")

    app.run(host=host, port=port, debug=True, use_reloader=True)

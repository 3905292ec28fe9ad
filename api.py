"""
Flask REST API for ChainCalc Web Keypad
Exposes the calculator state machine as JSON endpoints
"""
from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS
import threading
import config
from calculator import Calculator
from evaluator import evaluate, MalformedExpressionError
from formatting import format_value

app = Flask(__name__, static_folder='web', static_url_path='')
CORS(app)  # Enable CORS for all routes

# One calculator per server process. The dev server is threaded and a key
# press must run to completion before the next one is looked at.
calculator = Calculator()
calculator_lock = threading.Lock()


@app.route('/')
def index():
    """Serve the web keypad"""
    return send_from_directory(app.static_folder, 'index.html')


@app.route('/api')
def api_info():
    """API information page"""
    return """
    <html>
    <head><title>ChainCalc API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #000000; color: white;">
        <h1>ChainCalc API Server</h1>
        <p>API is running! Open the keypad at <a href="/" style="color: #FF9F0A;">Home</a></p>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/api/state" style="color: #FF9F0A;">/api/state</a> - Current display</li>
            <li>POST /api/press - Press a key, body {"label": "7"}</li>
            <li>POST /api/clear - Same as pressing AC</li>
            <li><a href="/api/evaluate?expression=2%20%2B%203" style="color: #FF9F0A;">/api/evaluate?expression=...</a> - Evaluate without touching the display</li>
            <li><a href="/api/layout" style="color: #FF9F0A;">/api/layout</a> - Keypad layout</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/state')
def get_state():
    """Get the current display and last expression"""
    try:
        with calculator_lock:
            state = calculator.snapshot()
        return jsonify({'success': True, 'data': state})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/press', methods=['POST'])
def press_key():
    """Press one key on the shared calculator"""
    payload = request.get_json(silent=True) or {}
    label = payload.get('label') if isinstance(payload, dict) else None
    if not isinstance(label, str):
        return jsonify({'success': False, 'error': "'label' must be a string"}), 400

    try:
        with calculator_lock:
            calculator.press(label)
            state = calculator.snapshot()
        return jsonify({'success': True, 'data': state})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/clear', methods=['POST'])
def clear():
    """Clear the calculator (AC)"""
    try:
        with calculator_lock:
            calculator.press("AC")
            state = calculator.snapshot()
        return jsonify({'success': True, 'data': state})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/evaluate')
def evaluate_expression():
    """Evaluate an expression left to right without changing the display"""
    expression = request.args.get('expression')
    if expression is None:
        return jsonify({'success': False, 'error': "missing 'expression' parameter"}), 400

    try:
        try:
            result = format_value(evaluate(expression))
        except MalformedExpressionError:
            result = config.ERROR_SENTINEL
        return jsonify({
            'success': True,
            'data': {
                'expression': expression,
                'result': result,
                'valid': result != config.ERROR_SENTINEL
            }
        })
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/layout')
def get_layout():
    """Get the keypad layout"""
    return jsonify({
        'success': True,
        'data': {
            'rows': config.BUTTON_ROWS,
            'operators': list(config.OPERATORS),
            'functions': list(config.FUNCTION_KEYS)
        }
    })


def main():
    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Keypad API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Web Interface for the Window Layout

Flask server that hands the generated layout to previewers and effect
tooling over HTTP, so they do not need a copy of layouts/window6x12.json.
Geometry only: nothing here renders or talks to the Fadecandy boards.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request
from werkzeug.utils import secure_filename

from layout_check import summarize_layout
from layout_codec import LAYOUT_ENCODING_NAME, dump_layout, encode_layout, layout_to_json, write_layout
from layout_system import LayoutBuffer, build_installation


class LayoutWebInterface:
    """Web interface serving one generated layout"""

    def __init__(self, buffer: LayoutBuffer,
                 host: str = '0.0.0.0',
                 port: int = 5000,
                 export_dir: str = 'layouts'):
        """
        Initialize web interface

        Args:
            buffer: Generated layout to serve
            host: Host to bind to
            port: Port to listen on
            export_dir: Directory that /api/export writes layout files into
        """
        self.buffer = buffer
        self.records = layout_to_json(buffer)
        self.summary = summarize_layout(self.records)
        self.document = dump_layout(self.records)
        self.host = host
        self.port = port
        self.export_dir = Path(export_dir)

        self.app = Flask(__name__)
        self.app.config['MAX_CONTENT_LENGTH'] = 64 * 1024

        self._register_routes()

    def _register_routes(self):
        """Register Flask routes"""

        @self.app.route('/layout.json')
        def layout_document():
            """Full layout, same bytes as the generator writes"""
            return self.app.response_class(self.document, mimetype='application/json')

        @self.app.route('/api/layout')
        def api_layout_summary():
            """API: Slot counts and grid extent"""
            return jsonify(self.summary)

        @self.app.route('/api/layout/encoded')
        def api_layout_encoded():
            """API: Compressed layout for embedding in other payloads"""
            return jsonify({
                'encoding': LAYOUT_ENCODING_NAME,
                'data': encode_layout(self.records),
                'total_slots': self.summary['total_slots'],
            })

        @self.app.route('/api/layout/<int:index>')
        def api_layout_slot(index):
            """API: One LED address; record is null for padding"""
            if index >= len(self.records):
                return jsonify({'error': f'Index {index} out of range (0-{len(self.records) - 1})'}), 404
            return jsonify({'index': index, 'record': self.records[index]})

        @self.app.route('/api/blocks/<int:column>/<int:row>')
        def api_block(column, row):
            """API: The LEDs of one glass block, in address order"""
            leds = self._block_leds(column, row)
            if not leds:
                return jsonify({'error': f'No block at ({column}, {row})'}), 404
            return jsonify({'gridXY': [column, row], 'leds': leds})

        @self.app.route('/api/export', methods=['POST'])
        def api_export():
            """API: Write the layout to a named file in the export directory"""
            data = request.get_json(silent=True)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                return jsonify({'error': 'Request body must be a JSON object'}), 400

            name = secure_filename(str(data.get('name', '')))
            if not name:
                return jsonify({'error': 'Missing or invalid name'}), 400
            if not name.endswith('.json'):
                name += '.json'

            indent = data.get('indent')
            if indent is not None and (not isinstance(indent, int) or isinstance(indent, bool) or indent < 0):
                return jsonify({'error': 'indent must be a non-negative integer'}), 400

            path = write_layout(self.records, self.export_dir / name, indent=indent)
            return jsonify({'success': True, 'path': str(path)})

    def _block_leds(self, column: int, row: int) -> List[Dict[str, Any]]:
        leds = []
        for index, record in enumerate(self.records):
            if record is not None and record['gridXY'] == [column, row]:
                leds.append({'index': index, **record})
        return leds

    def run(self, debug=False):
        """Start the web server"""
        print(f"🌐 Starting layout server at http://{self.host}:{self.port}")
        print(f"   Layout:  http://{self.host}:{self.port}/layout.json")
        print(f"   Summary: http://{self.host}:{self.port}/api/layout")

        self.app.run(host=self.host, port=self.port, debug=debug, threaded=True)


def create_app(buffer: Optional[LayoutBuffer] = None,
               host: str = '0.0.0.0',
               port: int = 5000,
               export_dir: str = 'layouts'):
    """Factory function to create the web application"""
    if buffer is None:
        buffer = build_installation()
    return LayoutWebInterface(buffer, host=host, port=port, export_dir=export_dir)


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Window Layout Web Interface')
    parser.add_argument('--host', default='0.0.0.0', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to listen on')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument('--export-dir', default='layouts',
                        help='Directory for /api/export files (default: layouts)')

    args = parser.parse_args()

    web_interface = create_app(host=args.host, port=args.port, export_dir=args.export_dir)
    web_interface.run(debug=args.debug)

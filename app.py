import logging

from flask import Flask, request, jsonify

from tour import BOARD_SIZE, TourSolver, find_order_index, survey

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.update(BOARD_SIZE=BOARD_SIZE, PORT=5000, DEBUG=False)
app.json.sort_keys = False
app.config.from_prefixed_env('KNIGHT_TOUR') # KNIGHT_TOUR_PORT=8000 等环境变量覆盖默认值


def bad_request(message):
    return jsonify({'success': False, 'message': message}), 400


def read_position(data):
    row, col = data.get('row'), data.get('col')
    if type(row) is not int or type(col) is not int:
        raise ValueError('row 和 col 必须是整数')
    n = app.config['BOARD_SIZE']
    if not (0 <= row < n and 0 <= col < n):
        raise ValueError(f'起点必须在 0-{n - 1} 范围内')
    return row, col


@app.route('/api/solve', methods=['POST'])
def solve_tour(): # 从指定起点求解一条巡游路线
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return bad_request('请求体必须是 JSON 对象')
    try:
        start = read_position(data)
    except ValueError as e:
        return bad_request(str(e))

    solver = TourSolver(app.config['BOARD_SIZE'])
    success, board, last_move = solver.solve(start)
    logger.info('solve %s -> success=%s, %d squares', start, success, solver.assigned)

    return jsonify({
        'success': success,
        'board': board,
        'path': solver.path,
        'last_move': last_move,
        'message': '找到完整巡游' if success else f'走到第{solver.assigned}格后无路可走'
    })


@app.route('/api/last-move', methods=['POST'])
def find_last_move(): # 在棋盘上查找指定步数所在的格子
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return bad_request('请求体必须是 JSON 对象')
    board = data.get('board')
    if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
        return bad_request('board 必须是二维数组')

    target = data.get('target', len(board) * len(board) - 1)
    if type(target) is not int:
        return bad_request('target 必须是整数')
    if not 0 <= target < len(board) * len(board):
        return bad_request(f'target 必须在 0-{len(board) * len(board) - 1} 范围内')

    position = find_order_index(board, target)
    return jsonify({
        'success': True,
        'found': position is not None,
        'position': position
    })


@app.route('/api/survey', methods=['GET'])
def survey_starts(): # 统计每个起点能否完成巡游
    n = app.config['BOARD_SIZE']
    results = survey(n)
    failures = [divmod(k, n) for k, ok in enumerate(results) if not ok]
    return jsonify({
        'success': True,
        'n': n,
        'results': results,
        'failures': failures
    })


def main():
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'WARNING'),
                        format='%(levelname)s:%(name)s:%(message)s')
    app.run(debug=app.config['DEBUG'], port=app.config['PORT'])


if __name__ == '__main__':
    main()

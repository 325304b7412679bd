import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

BOARD_SIZE = 8
UNVISITED = -1

KNIGHT_MOVES = (
    (2, 1), (1, 2), (-1, 2), (-2, 1),
    (-2, -1), (-1, -2), (1, -2), (2, -1)
) # 八种跳法，顺序即平局时的优先级

TourResult = namedtuple('TourResult', ['success', 'board', 'last_move'])


class TourSolver: # Warnsdorff 贪心求解单条巡游，不回溯
    def __init__(self, n=BOARD_SIZE):
        self.n = n
        self.moves = KNIGHT_MOVES
        self.board = self.empty_board()
        self.current_pos = None
        self.path = [] # 已走过的格子，按步数排列

    def empty_board(self):
        return [[UNVISITED] * self.n for _ in range(self.n)]

    @property
    def assigned(self):
        return len(self.path)

    @property
    def complete(self):
        return self.assigned == self.n * self.n

    def within_board_check(self, x, y):
        return 0 <= x < self.n and 0 <= y < self.n

    def is_valid_move(self, x, y):
        return self.within_board_check(x, y) and self.board[x][y] == UNVISITED

    def accessibility(self, x, y):
        return sum(1 for dx, dy in self.moves if self.is_valid_move(x + dx, y + dy))

    def next_moves(self): # 按后续可走路线数升序返回候选 ((x, y), ways)
        moves = []
        x, y = self.current_pos
        for dx, dy in self.moves:
            nx, ny = x + dx, y + dy
            if self.is_valid_move(nx, ny):
                moves.append(((nx, ny), self.accessibility(nx, ny)))
        return sorted(moves, key=lambda m: m[-1]) # sorted 是稳定排序

    def go_ahead(self, pos):
        self.current_pos = pos
        self.board[pos[0]][pos[1]] = self.assigned
        self.path.append(pos)

    def reset(self, start):
        row, col = start
        if not self.within_board_check(row, col):
            raise ValueError(f'起点 {start!r} 不在 {self.n}x{self.n} 棋盘内')
        self.board = self.empty_board()
        self.path = []
        self.go_ahead((row, col))

    def step(self): # 前进一格，无路可走时返回 False
        candidates = self.next_moves()
        if not candidates:
            return False
        pos, ways = candidates[0]
        logger.debug('move %d -> %s (accessibility %d)', self.assigned, pos, ways)
        self.go_ahead(pos)
        return True

    def solve(self, start):
        self.reset(start)
        logger.debug('solving from %s on %dx%d board', start, self.n, self.n)

        while not self.complete:
            if not self.step():
                logger.info('stuck at %s after %d squares', self.current_pos, self.assigned)
                return TourResult(False, self.board, None)

        return TourResult(True, self.board, self.current_pos)


def solve(start, n=BOARD_SIZE):
    return TourSolver(n).solve(start)


def find_order_index(board, target): # 查找第 target 步所在的格子，找不到返回 None
    if target < 0:
        return None # UNVISITED 不是步数
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            if value == target:
                return (i, j)
    return None


def is_knight_move(a, b):
    return (b[0] - a[0], b[1] - a[1]) in KNIGHT_MOVES


def tour_path(board): # 按步数排列已访问的格子
    visited = [(value, (i, j))
               for i, row in enumerate(board)
               for j, value in enumerate(row) if value != UNVISITED]
    return [pos for _, pos in sorted(visited)]


def is_valid_tour(board): # 步数从 0 连续编号，且相邻两步都是合法马步
    indices = sorted(value for row in board for value in row if value != UNVISITED)
    if indices != list(range(len(indices))):
        return False
    path = tour_path(board)
    return all(is_knight_move(a, b) for a, b in zip(path, path[1:]))


def survey(n=BOARD_SIZE): # 逐个起点求解，按行优先返回是否成功
    return [solve((i, j), n).success for i in range(n) for j in range(n)]

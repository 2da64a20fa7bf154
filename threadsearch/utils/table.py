#!filepath: threadsearch/utils/table.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple, Union

from threadsearch.utils.errors import UserInputError

Cell = Union[str, Tuple[str, str]]

ALIGN_LEFT = "<"
ALIGN_RIGHT = ">"
ALIGN_CENTER = "="


class Table:
    """
    纯文本表格：

        t = Table()
        t.row().add("op").add("threads", ">")
        t.row().add("grow").add(123, ">")
        t.write(print)

    - 列宽 = 该列最长单元格
    - 对齐：'<' 左（默认）/ '>' 右 / '=' 居中（多余空格放右侧）
    - spacer：列前的分隔串，第 0 列默认 ''，其他列默认 ' '；
      set_spacer(columns, s) 设置行尾 spacer
    """

    def __init__(self):
        self._rows: List[List[Cell]] = []
        self._cols: List[int] = []
        self._spacers: Dict[int, str] = {}
        self._row: Optional[List[Cell]] = None

    # ---------------------------------------------------------
    # 行构建
    # ---------------------------------------------------------
    def row(self) -> "Table":
        row: List[Cell] = []
        self._rows.append(row)
        self._row = row
        return self

    def end(self) -> "Table":
        """结束当前行；没有进行中的行时追加一个空行。"""
        if self._row is None:
            self.row()
        self._row = None
        return self

    def end_if_started(self) -> "Table":
        self._row = None
        return self

    def add(self, value, align: str = "") -> "Table":
        row = self._current_row()
        text = str(value)
        idx = len(row)
        self._widen(idx, len(text))
        row.append((text, align) if align else text)
        return self

    def skip(self, n: int = 1) -> "Table":
        row = self._current_row()
        for _ in range(n):
            self._widen(len(row), 0)
            row.append("")
        return self

    # ---------------------------------------------------------
    # spacer
    # ---------------------------------------------------------
    def set_spacer(self, col: int, spacer: str) -> "Table":
        while col > len(self._cols):
            self._cols.append(0)
        self._spacers[col] = spacer
        return self

    def get_spacer(self, col: int) -> Optional[str]:
        cl = len(self._cols)
        if col < 0 or col > cl:
            return None
        spacer = self._spacers.get(col)
        if spacer is not None:
            return spacer
        if col == 0 or col == cl or self._cols[col] == 0:
            return ""
        return " "

    # ---------------------------------------------------------
    # 输出
    # ---------------------------------------------------------
    def __len__(self) -> int:
        return len(self._rows)

    @property
    def columns(self) -> int:
        return len(self._cols)

    def format_row(self, index: int) -> str:
        if not 0 <= index < len(self._rows):
            raise IndexError(f"Invalid row {index}")

        row = self._rows[index]
        out: List[str] = []

        for i, width in enumerate(self._cols):
            spc = self._spacers.get(i, "" if i == 0 else " ")
            out.append(spc)

            if width == 0:
                continue

            cell = row[i] if i < len(row) else ""
            value, align = cell if isinstance(cell, tuple) else (cell, ALIGN_LEFT)
            pad = width - len(value)

            if align == ALIGN_RIGHT:
                out.append(" " * pad + value)
            elif align == ALIGN_CENTER:
                left = pad // 2
                out.append(" " * left + value + " " * (pad - left))
            else:
                out.append(value + " " * pad)

        out.append(self._spacers.get(len(self._cols), ""))
        return "".join(out)

    def lines(self) -> List[str]:
        return [self.format_row(i) for i in range(len(self._rows))]

    def write(self, writer: Callable[[str], None]) -> None:
        for line in self.lines():
            writer(line)

    # ---------------------------------------------------------
    # helpers
    # ---------------------------------------------------------
    def _current_row(self) -> List[Cell]:
        if self._row is None:
            raise UserInputError("Attempt to add without row")
        return self._row

    def _widen(self, idx: int, width: int) -> None:
        while idx >= len(self._cols):
            self._cols.append(0)
        self._cols[idx] = max(self._cols[idx], width)

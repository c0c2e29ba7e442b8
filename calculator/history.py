"""计算历史：内存中的有界列表，最新的在前；存储由外部负责"""
import time
import logging
from dataclasses import dataclass

import pandas as pd

from config.config import HISTORY_CONFIG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    result: str      # 已格式化的结果文本
    timestamp: int   # 毫秒

    def to_record(self):
        return {"expr": self.expression, "result": self.result, "ts": self.timestamp}


class CalculationHistory:

    def __init__(self, max_items=None):
        if max_items is None:
            max_items = HISTORY_CONFIG["max_items"]
        self.max_items = max_items
        self._entries = []

    @staticmethod
    def storage_key(instance_id):
        """外部存储使用的key，每个计算器实例一份"""
        return f"{HISTORY_CONFIG['storage_key_prefix']}{instance_id}"

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def entries(self):
        return list(self._entries)

    def add(self, expression, result, timestamp=None):
        """新记录插到最前，超过上限的旧记录丢弃"""
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        entry = HistoryEntry(expression, result, int(timestamp))
        self._entries.insert(0, entry)
        del self._entries[self.max_items:]
        return entry

    def add_result(self, evaluation):
        """只有成功的求值进入历史；失败时历史不变"""
        if not evaluation.ok:
            return None
        return self.add(evaluation.expression, evaluation.formatted)

    def clear(self):
        self._entries.clear()

    def to_records(self):
        return [entry.to_record() for entry in self._entries]

    @classmethod
    def from_records(cls, records, max_items=None):
        """
        从外部存储的记录恢复，跳过字段类型不对的记录
        Args:
            records: [{"expr": str, "result": str, "ts": int}, ...]，最新的在前
        """
        history = cls(max_items)
        if not isinstance(records, list):
            logger.warning(f"Ignoring history payload of type {type(records).__name__}")
            return history

        for record in records:
            if len(history._entries) >= history.max_items:
                break
            if not isinstance(record, dict):
                continue
            expr, result = record.get("expr"), record.get("result")
            if not isinstance(expr, str) or not isinstance(result, str):
                continue
            try:
                ts = int(record.get("ts") or 0)
            except (TypeError, ValueError, OverflowError):
                ts = 0
            history._entries.append(HistoryEntry(expr, result, ts))
        return history

    def to_dataframe(self):
        df = pd.DataFrame(self.to_records(), columns=["expr", "result", "ts"])
        df["ts"] = pd.to_datetime(df["ts"], unit="ms")
        return df

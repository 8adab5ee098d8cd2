"""
记录编辑上下文

编辑上下文保存一份加载时的基准记录（base_record），
子类把可编辑字段拆成属性，record 属性根据当前字段值生成新记录。
is_dirty 通过按值比较 base_record 与 record 得到。
"""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Optional, TypeVar

TRecord = TypeVar("TRecord")

FieldChangedListener = Callable[[Optional[str]], None]
EditStateListener = Callable[[bool], None]


class RecordEditContextBase(ABC, Generic[TRecord]):
    """编辑上下文基类"""

    def __init__(self, record: TRecord):
        self.base_record: TRecord = record
        self.uid: Optional[uuid.UUID] = None
        self.field_changed_listeners: List[FieldChangedListener] = []
        self.edit_state_listeners: List[EditStateListener] = []
        self.load(record, notify=False)

    @property
    @abstractmethod
    def record(self) -> TRecord:
        """根据当前字段值生成的新记录"""

    @abstractmethod
    def load(self, record: TRecord, notify: bool = True) -> None:
        """把记录载入编辑字段，并设为新的基准记录"""

    @abstractmethod
    def as_new_record(self) -> TRecord:
        """当前字段值 + 新 uid"""

    @property
    def is_dirty(self) -> bool:
        return not self.base_record.same_values(self.record)

    @property
    def is_new(self) -> bool:
        return self.uid is None

    def reset(self) -> None:
        """丢弃修改，恢复到基准记录"""
        self.load(self.base_record)

    def set_as_saved(self) -> None:
        """保存成功后把当前值设为新的基准"""
        self.load(self.record)

    def notify_field_changed(self, field_name: Optional[str]) -> None:
        for listener in list(self.field_changed_listeners):
            listener(field_name)
        dirty = self.is_dirty
        for listener in list(self.edit_state_listeners):
            listener(dirty)

    def _update_if_changed(self, attr: str, value: Any, field_name: str) -> bool:
        """
        字段值变化时写入并通知

        Args:
            attr: 保存字段值的实例属性名
            value: 新值
            field_name: 通知里使用的字段名

        Returns:
            是否发生变化
        """
        if getattr(self, attr) == value:
            return False
        setattr(self, attr, value)
        self.notify_field_changed(field_name)
        return True

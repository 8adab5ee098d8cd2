"""
SQLAlchemy ORM 模型定义

- Base: 声明式基类
- RecordMixin: 记录的值语义辅助（复制、比较、转 dict）
- WeatherForecast: 示例记录，以 uid（UUID）为主键
"""

import uuid
import datetime
from typing import Any, Dict, Optional

from sqlalchemy import Date, Integer, String, Uuid, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy 声明式基类"""
    pass


class RecordMixin:
    """
    记录的值语义辅助

    ORM 实例按身份（identity map）管理，不重写 __eq__；
    需要按值比较或生成修改后的副本时使用这里的方法。
    """

    def to_dict(self) -> Dict[str, Any]:
        """所有映射列的当前值"""
        mapper = inspect(type(self))
        return {attr.key: getattr(self, attr.key) for attr in mapper.column_attrs}

    def copy_with(self, **changes: Any):
        """
        生成一个新的（瞬态）记录，字段值取自当前记录并应用 changes

        Args:
            **changes: 需要覆盖的字段

        Returns:
            同类型的新实例，不属于任何 Session
        """
        values = self.to_dict()
        unknown = set(changes) - set(values)
        if unknown:
            raise AttributeError(f"{type(self).__name__} has no mapped field(s): {sorted(unknown)}")
        values.update(changes)
        return type(self)(**values)

    def same_values(self, other: Any) -> bool:
        """两条记录是否同类型且所有列值相同"""
        if other is None or type(other) is not type(self):
            return False
        return self.to_dict() == other.to_dict()


class WeatherForecast(RecordMixin, Base):
    """
    天气预报记录

    uid 同时是主键和记录身份（ItemQueryRequest 按 uid 查询）。
    """
    __tablename__ = "weather_forecasts"

    uid: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    date: Mapped[datetime.date] = mapped_column(Date, default=datetime.date.today, nullable=False, index=True)

    temperature_c: Mapped[int] = mapped_column(Integer, default=60, nullable=False)

    summary: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, default="Testing")

    @property
    def temperature_f(self) -> int:
        """华氏温度（不落库）"""
        return 32 + int(self.temperature_c / 0.5556)

    def __repr__(self) -> str:
        return (
            f"WeatherForecast(uid={self.uid}, date={self.date}, "
            f"temperature_c={self.temperature_c}, summary={self.summary!r})"
        )

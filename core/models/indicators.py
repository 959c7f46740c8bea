"""
Indicator result models

Every calculation returns one envelope {type, name, parameters, values}.
The envelope is a tagged union on `type` so the shape of `values` is explicit:
- SeriesIndicatorResult: one series (sma, ema, rsi, volume_ma)
- MACDIndicatorResult: MACD line in `values`, plus signal and histogram
- BollingerIndicatorResult: five-band bundle in `values`
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class IndicatorValue(BaseModel):
    """Single indicator point aligned to a candle timestamp"""

    timestamp: int
    value: float


class MACDSeries(BaseModel):
    """MACD line, signal line and histogram (right-aligned)"""

    macd: list[IndicatorValue] = Field(default_factory=list)
    signal: list[IndicatorValue] = Field(default_factory=list)
    histogram: list[IndicatorValue] = Field(default_factory=list)


class BollingerBands(BaseModel):
    """Five parallel band series, outermost first"""

    upper2: list[IndicatorValue] = Field(default_factory=list)
    upper1: list[IndicatorValue] = Field(default_factory=list)
    middle: list[IndicatorValue] = Field(default_factory=list)
    lower1: list[IndicatorValue] = Field(default_factory=list)
    lower2: list[IndicatorValue] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.middle)


class _IndicatorEnvelope(BaseModel):
    name: str
    parameters: dict[str, Any] = Field(default_factory=dict)


class SeriesIndicatorResult(_IndicatorEnvelope):
    type: Literal["sma", "ema", "rsi", "volume_ma"]
    values: list[IndicatorValue] = Field(default_factory=list)


class MACDIndicatorResult(_IndicatorEnvelope):
    type: Literal["macd"] = "macd"
    values: list[IndicatorValue] = Field(
        default_factory=list, description="MACD line (fast EMA - slow EMA)"
    )
    signal: list[IndicatorValue] = Field(default_factory=list)
    histogram: list[IndicatorValue] = Field(default_factory=list)


class BollingerIndicatorResult(_IndicatorEnvelope):
    type: Literal["bollinger"] = "bollinger"
    values: BollingerBands = Field(default_factory=BollingerBands)


IndicatorResult = Annotated[
    Union[SeriesIndicatorResult, MACDIndicatorResult, BollingerIndicatorResult],
    Field(discriminator="type"),
]

indicator_result_adapter: TypeAdapter[IndicatorResult] = TypeAdapter(IndicatorResult)

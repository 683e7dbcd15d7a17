"""SQL statements used against the crossroad database."""

from __future__ import annotations

REGIONS_QUERY = "SELECT * FROM public.region;"

_CROSSES = (
    "SELECT t1.id,t1.describ,t1.subarea,t1.region,t1.area,"
    "TO_CHAR(t2.ledit,'hh24:mi:ss dd.mm.yyyy') as ledit "
    "FROM public.cross as t1 LEFT JOIN public.svg as t2 "
    "ON t1.id=t2.id AND t1.region=t2.region AND t1.area=t2.area "
    "WHERE t1.region={region} AND t1.area={area};"
)

_GET_CROSS = (
    "SELECT bottom, state, picture, extend, "
    "TO_CHAR(ledit,'hh24:mi:ss dd.mm.yyyy') as ledit "
    "FROM public.svg "
    "WHERE region={region} and area={area} and id={cross_id};"
)

_SEND_CROSS = (
    "UPDATE public.svg "
    "SET bottom=:bottom, picture=:picture, extend=:extend, state=:state, ledit=NOW() "
    "WHERE region={region} AND area={area} AND id={cross_id};"
)


def crosses_query(region: int, area: int) -> str:
    """All crossroads of one area, with their last edit time."""
    return _CROSSES.format(region=int(region), area=int(area))


def get_cross_query(region: int, area: int, cross_id: int) -> str:
    """The stored picture and state of one crossroad."""
    return _GET_CROSS.format(region=int(region), area=int(area), cross_id=int(cross_id))


def send_cross_query(region: int, area: int, cross_id: int) -> str:
    """Update of one crossroad; values bind to :bottom, :picture, :extend, :state."""
    return _SEND_CROSS.format(region=int(region), area=int(area), cross_id=int(cross_id))
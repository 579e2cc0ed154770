"""
Seasonal month palettes, keyed by month index (0=January .. 11=December).

  Winter (Nov-Jan)  cold, pale
  Spring (Feb-Apr)  fresh pastels
  Summer (May-Jun)  bright, saturated
  Rain   (Jul-Aug)  moody, water-heavy
  Autumn (Sep-Oct)  earthy, golden
"""

from __future__ import annotations
from typing import Dict

from ..core.types import ThemePalette


def _p(container_bg, container_border, selected_bg, today_bg, today_text,
       normal_text, normal_hover_bg, disabled_bg, disabled_text) -> ThemePalette:
    return ThemePalette(
        container_bg=container_bg,
        container_border=container_border,
        selected_bg=selected_bg,
        selected_text="text-white",
        today_bg=today_bg,
        today_text=today_text,
        normal_text=normal_text,
        normal_hover_bg=normal_hover_bg,
        disabled_bg=disabled_bg,
        disabled_text=disabled_text,
        border_radius="rounded-xl",
    )

MOODS: Dict[int, str] = {
    0: "deep-winter",
    1: "thaw",
    2: "bloom",
    3: "full-spring",
    4: "rising-heat",
    5: "peak-summer",
    6: "monsoon",
    7: "lush-rain",
    8: "soft-autumn",
    9: "deep-autumn",
    10: "early-winter",
    11: "coldest",
}

SEASONAL: Dict[int, ThemePalette] = {
    0: _p("bg-gradient-to-br from-slate-100 via-blue-100 to-slate-200", "border border-slate-300",
          "bg-blue-500", "bg-blue-200", "text-slate-900",
          "text-slate-700", "hover:bg-blue-50", "bg-slate-50", "text-slate-300"),
    1: _p("bg-gradient-to-br from-blue-50 via-emerald-50 to-lime-100", "border border-emerald-200",
          "bg-emerald-500", "bg-lime-200", "text-emerald-900",
          "text-emerald-800", "hover:bg-emerald-50", "bg-emerald-50", "text-emerald-200"),
    2: _p("bg-gradient-to-br from-rose-50 via-pink-100 to-green-100", "border border-pink-200",
          "bg-pink-500", "bg-rose-200", "text-rose-900",
          "text-rose-800", "hover:bg-pink-50", "bg-rose-50", "text-rose-200"),
    3: _p("bg-gradient-to-br from-green-50 via-lime-100 to-yellow-100", "border border-lime-300",
          "bg-lime-600", "bg-yellow-200", "text-lime-900",
          "text-lime-800", "hover:bg-lime-50", "bg-lime-50", "text-lime-200"),
    4: _p("bg-gradient-to-br from-yellow-100 via-orange-200 to-amber-300", "border border-amber-400",
          "bg-orange-500", "bg-yellow-300", "text-orange-900",
          "text-orange-900", "hover:bg-orange-100", "bg-orange-50", "text-orange-200"),
    5: _p("bg-gradient-to-br from-orange-300 via-red-300 to-yellow-300", "border border-red-500",
          "bg-red-600", "bg-orange-400", "text-white",
          "text-red-900", "hover:bg-red-100", "bg-red-50", "text-red-200"),
    6: _p("bg-gradient-to-br from-slate-300 via-blue-300 to-indigo-400", "border border-indigo-500",
          "bg-indigo-700", "bg-blue-400", "text-white",
          "text-slate-900", "hover:bg-blue-100", "bg-slate-100", "text-slate-400"),
    7: _p("bg-gradient-to-br from-emerald-300 via-teal-300 to-slate-400", "border border-teal-600",
          "bg-teal-700", "bg-emerald-400", "text-white",
          "text-slate-900", "hover:bg-teal-100", "bg-teal-50", "text-teal-300"),
    8: _p("bg-gradient-to-br from-yellow-200 via-amber-300 to-orange-300", "border border-amber-500",
          "bg-amber-600", "bg-yellow-400", "text-amber-900",
          "text-amber-900", "hover:bg-amber-100", "bg-amber-50", "text-amber-200"),
    9: _p("bg-gradient-to-br from-orange-400 via-red-400 to-amber-500", "border border-orange-700",
          "bg-red-700", "bg-orange-500", "text-white",
          "text-amber-950", "hover:bg-orange-200", "bg-orange-50", "text-orange-300"),
    10: _p("bg-gradient-to-br from-slate-200 via-blue-200 to-gray-300", "border border-slate-400",
           "bg-slate-700", "bg-blue-300", "text-slate-900",
           "text-slate-700", "hover:bg-slate-100", "bg-slate-50", "text-slate-300"),
    11: _p("bg-gradient-to-br from-cyan-100 via-blue-200 to-indigo-300", "border border-cyan-500",
           "bg-blue-800", "bg-cyan-300", "text-white",
           "text-slate-800", "hover:bg-cyan-100", "bg-cyan-50", "text-cyan-300"),
}

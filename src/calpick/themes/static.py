from __future__ import annotations

from ..core.types import ThemePalette

LIGHT = ThemePalette(
    container_bg="bg-white",
    container_border="border border-gray-100",
    selected_bg="bg-blue-600",
    selected_text="text-white",
    today_bg="bg-blue-100",
    today_text="text-blue-600",
    normal_text="text-gray-700",
    normal_hover_bg="hover:bg-gray-200",
    disabled_bg="bg-gray-100",
    disabled_text="text-gray-400",
    border_radius="rounded-xl",
)

DARK = ThemePalette(
    container_bg="bg-gray-900",
    container_border="border border-gray-700",
    selected_bg="bg-blue-500",
    selected_text="text-white",
    today_bg="bg-gray-700",
    today_text="text-blue-300",
    normal_text="text-gray-200",
    normal_hover_bg="hover:bg-gray-800",
    disabled_bg="bg-gray-800",
    disabled_text="text-gray-600",
    border_radius="rounded-xl",
    range_bg="bg-blue-900",
    range_text="text-blue-200",
)

METALLIC = ThemePalette(
    container_bg="bg-gradient-to-br from-gray-200 via-gray-300 to-gray-400",
    container_border="border border-gray-500",
    selected_bg="bg-gray-700",
    selected_text="text-white",
    today_bg="bg-gray-400",
    today_text="text-gray-900",
    normal_text="text-gray-800",
    normal_hover_bg="hover:bg-gray-300",
    disabled_bg="bg-gray-200",
    disabled_text="text-gray-400",
    border_radius="rounded-md",
    range_bg="bg-gray-300",
    range_text="text-gray-900",
)

CYBERPUNK = ThemePalette(
    container_bg="bg-black",
    container_border="border border-fuchsia-500",
    selected_bg="bg-fuchsia-600",
    selected_text="text-yellow-300",
    today_bg="bg-cyan-500",
    today_text="text-black",
    normal_text="text-cyan-300",
    normal_hover_bg="hover:bg-fuchsia-900",
    disabled_bg="bg-gray-900",
    disabled_text="text-gray-700",
    border_radius="rounded-none",
    range_bg="bg-fuchsia-950",
    range_text="text-fuchsia-300",
)

RETRO = ThemePalette(
    container_bg="bg-amber-50",
    container_border="border-2 border-amber-800",
    selected_bg="bg-orange-700",
    selected_text="text-amber-50",
    today_bg="bg-yellow-300",
    today_text="text-amber-900",
    normal_text="text-amber-900",
    normal_hover_bg="hover:bg-amber-200",
    disabled_bg="bg-amber-100",
    disabled_text="text-amber-300",
    border_radius="rounded-sm",
    range_bg="bg-orange-100",
    range_text="text-orange-800",
)

NATURE = ThemePalette(
    container_bg="bg-gradient-to-br from-green-50 to-emerald-100",
    container_border="border border-emerald-200",
    selected_bg="bg-emerald-600",
    selected_text="text-white",
    today_bg="bg-lime-200",
    today_text="text-emerald-900",
    normal_text="text-emerald-800",
    normal_hover_bg="hover:bg-emerald-100",
    disabled_bg="bg-stone-100",
    disabled_text="text-stone-400",
    border_radius="rounded-full",
    range_bg="bg-emerald-50",
    range_text="text-emerald-700",
)

"""Backends consuming resolved category levels (charts, exports)."""

from survey_levels.backends.radar_chart import RadarChartData, build_radar_config, chart_data, save_radar_config

__all__ = ["RadarChartData", "build_radar_config", "chart_data", "save_radar_config"]

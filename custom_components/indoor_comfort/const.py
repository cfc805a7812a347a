"""Constants for the Indoor Comfort Advisor integration."""

from datetime import timedelta

DOMAIN = "indoor_comfort"

CONF_TEMPERATURE_SENSOR = "temperature_sensor"
CONF_HUMIDITY_SENSOR = "humidity_sensor"

DEFAULT_NAME = "Indoor Comfort Advisor"

# Frequent enough to pick up the date rollover shortly after midnight
SCAN_INTERVAL = timedelta(minutes=30)

SENSOR_TYPE_RECOMMENDED_TEMPERATURE = "recommended_temperature"
SENSOR_TYPE_RECOMMENDED_HUMIDITY = "recommended_humidity"
SENSOR_TYPE_SEASON = "season"
SENSOR_TYPE_ADVICE = "advice"

ATTR_DATE = "date"
ATTR_OUTDOOR_TEMPERATURE = "outdoor_temperature"
ATTR_OUTDOOR_HUMIDITY = "outdoor_humidity"
ATTR_ADVICE = "advice"

NO_ADVICE = "없음"

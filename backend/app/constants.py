"""Reference data for the CWA 36-hour forecast dataset."""

# The 22 administrative regions served by F-C0032-001, in CWA order.
AVAILABLE_CITIES: tuple[str, ...] = (
    "臺北市", "新北市", "桃園市", "臺中市", "臺南市", "高雄市",
    "基隆市", "新竹市", "新竹縣", "苗栗縣", "彰化縣", "南投縣",
    "雲林縣", "嘉義市", "嘉義縣", "屏東縣", "宜蘭縣", "花蓮縣",
    "臺東縣", "澎湖縣", "金門縣", "連江縣",
)

# Cities shown in the service discovery payload.
EXAMPLE_CITIES: tuple[str, ...] = ("臺中市", "高雄市", "臺北市")

# Weather element codes
ELEMENT_WEATHER = "Wx"
ELEMENT_RAIN = "PoP"
ELEMENT_MIN_TEMP = "MinT"
ELEMENT_MAX_TEMP = "MaxT"
ELEMENT_COMFORT = "CI"
ELEMENT_WIND_SPEED = "WS"

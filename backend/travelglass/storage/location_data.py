from __future__ import annotations

from typing import List


def _city(name: str, local_name: str, latitude: float, longitude: float) -> dict:
    return {"name": name, "local_name": local_name, "latitude": latitude, "longitude": longitude}


def _region(name: str, local_name: str, *cities: dict) -> dict:
    return {"name": name, "local_name": local_name, "cities": list(cities)}


LOCATION_CATALOG: List[dict] = [
    {
        "name": "China",
        "local_name": "中国",
        "code": "CN",
        "regions": [
            _region("Beijing", "北京市", _city("Beijing", "北京", 39.9042, 116.4074)),
            _region("Shanghai", "上海市", _city("Shanghai", "上海", 31.2304, 121.4737)),
            _region(
                "Guangdong",
                "广东省",
                _city("Guangzhou", "广州", 23.1291, 113.2644),
                _city("Shenzhen", "深圳", 22.5431, 114.0579),
                _city("Zhuhai", "珠海", 22.2769, 113.5678),
            ),
            _region(
                "Zhejiang",
                "浙江省",
                _city("Hangzhou", "杭州", 30.2741, 120.1551),
                _city("Ningbo", "宁波", 29.8683, 121.5440),
            ),
            _region(
                "Jiangsu",
                "江苏省",
                _city("Nanjing", "南京", 32.0603, 118.7969),
                _city("Suzhou", "苏州", 31.2989, 120.5853),
            ),
            _region("Sichuan", "四川省", _city("Chengdu", "成都", 30.5728, 104.0668)),
            _region("Chongqing", "重庆市", _city("Chongqing", "重庆", 29.4316, 106.9123)),
            _region("Hubei", "湖北省", _city("Wuhan", "武汉", 30.5928, 114.3055)),
            _region("Shaanxi", "陕西省", _city("Xi'an", "西安", 34.3416, 108.9398)),
            _region("Tianjin", "天津市", _city("Tianjin", "天津", 39.3434, 117.3616)),
        ],
    },
    {
        "name": "United States",
        "local_name": "美国",
        "code": "US",
        "regions": [
            _region(
                "California",
                "加利福尼亚州",
                _city("Los Angeles", "洛杉矶", 34.0522, -118.2437),
                _city("San Francisco", "旧金山", 37.7749, -122.4194),
                _city("San Diego", "圣地亚哥", 32.7157, -117.1611),
            ),
            _region("New York", "纽约州", _city("New York City", "纽约", 40.7128, -74.0060)),
            _region(
                "Florida",
                "佛罗里达州",
                _city("Miami", "迈阿密", 25.7617, -80.1918),
                _city("Orlando", "奥兰多", 28.5383, -81.3792),
            ),
            _region("Nevada", "内华达州", _city("Las Vegas", "拉斯维加斯", 36.1699, -115.1398)),
            _region("Washington", "华盛顿州", _city("Seattle", "西雅图", 47.6062, -122.3321)),
            _region("Illinois", "伊利诺伊州", _city("Chicago", "芝加哥", 41.8781, -87.6298)),
        ],
    },
    {
        "name": "Japan",
        "local_name": "日本",
        "code": "JP",
        "regions": [
            _region("Tokyo", "东京都", _city("Tokyo", "东京", 35.6762, 139.6503)),
            _region("Osaka", "大阪府", _city("Osaka", "大阪", 34.6937, 135.5023)),
            _region("Kyoto", "京都府", _city("Kyoto", "京都", 35.0116, 135.7681)),
            _region("Hokkaido", "北海道", _city("Sapporo", "札幌", 43.0642, 141.3469)),
        ],
    },
    {
        "name": "United Kingdom",
        "local_name": "英国",
        "code": "GB",
        "regions": [
            _region(
                "England",
                "英格兰",
                _city("London", "伦敦", 51.5074, -0.1278),
                _city("Manchester", "曼彻斯特", 53.4808, -2.2426),
            ),
            _region("Scotland", "苏格兰", _city("Edinburgh", "爱丁堡", 55.9533, -3.1883)),
        ],
    },
    {
        "name": "France",
        "local_name": "法国",
        "code": "FR",
        "regions": [
            _region("Île-de-France", "法兰西岛", _city("Paris", "巴黎", 48.8566, 2.3522)),
            _region("Provence-Alpes-Côte d'Azur", "普罗旺斯", _city("Nice", "尼斯", 43.7102, 7.2620)),
        ],
    },
    {
        "name": "Australia",
        "local_name": "澳大利亚",
        "code": "AU",
        "regions": [
            _region("New South Wales", "新南威尔士州", _city("Sydney", "悉尼", -33.8688, 151.2093)),
            _region("Victoria", "维多利亚州", _city("Melbourne", "墨尔本", -37.8136, 144.9631)),
        ],
    },
    {
        "name": "Italy",
        "local_name": "意大利",
        "code": "IT",
        "regions": [
            _region("Lazio", "拉齐奥", _city("Rome", "罗马", 41.9028, 12.4964)),
            _region("Lombardy", "伦巴第", _city("Milan", "米兰", 45.4642, 9.1900)),
            _region("Veneto", "威尼托", _city("Venice", "威尼斯", 45.4408, 12.3155)),
        ],
    },
    {
        "name": "Spain",
        "local_name": "西班牙",
        "code": "ES",
        "regions": [
            _region("Community of Madrid", "马德里自治区", _city("Madrid", "马德里", 40.4168, -3.7038)),
            _region("Catalonia", "加泰罗尼亚", _city("Barcelona", "巴塞罗那", 41.3851, 2.1734)),
        ],
    },
    {
        "name": "Germany",
        "local_name": "德国",
        "code": "DE",
        "regions": [
            _region("Bavaria", "巴伐利亚", _city("Munich", "慕尼黑", 48.1351, 11.5820)),
            _region("Berlin", "柏林", _city("Berlin", "柏林", 52.5200, 13.4050)),
        ],
    },
    {
        "name": "Peru",
        "local_name": "秘鲁",
        "code": "PE",
        "regions": [
            _region(
                "Cusco",
                "库斯科",
                _city("Cusco", "库斯科", -13.5320, -71.9675),
                _city("Machu Picchu", "马丘比丘", -13.1631, -72.5450),
            ),
            _region("Lima", "利马", _city("Lima", "利马", -12.0464, -77.0428)),
        ],
    },
    {
        "name": "South Korea",
        "local_name": "韩国",
        "code": "KR",
        "regions": [
            _region("Seoul", "首尔特别市", _city("Seoul", "首尔", 37.5665, 126.9780)),
            _region("Busan", "釜山广域市", _city("Busan", "釜山", 35.1796, 129.0756)),
        ],
    },
    {
        "name": "Thailand",
        "local_name": "泰国",
        "code": "TH",
        "regions": [
            _region("Bangkok", "曼谷", _city("Bangkok", "曼谷", 13.7563, 100.5018)),
            _region("Phuket", "普吉", _city("Phuket", "普吉", 7.8804, 98.3923)),
        ],
    },
    {
        "name": "Singapore",
        "local_name": "新加坡",
        "code": "SG",
        "regions": [
            _region("Singapore", "新加坡", _city("Singapore", "新加坡", 1.3521, 103.8198)),
        ],
    },
    {
        "name": "Canada",
        "local_name": "加拿大",
        "code": "CA",
        "regions": [
            _region("Ontario", "安大略省", _city("Toronto", "多伦多", 43.6532, -79.3832)),
            _region("Quebec", "魁北克省", _city("Montreal", "蒙特利尔", 45.5017, -73.5673)),
            _region("British Columbia", "不列颠哥伦比亚省", _city("Vancouver", "温哥华", 49.2827, -123.1207)),
        ],
    },
]

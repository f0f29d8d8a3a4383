"""
Thai province area codes accepted by the Longdo search ``area`` parameter.
"""
from typing import Dict, Optional

from route_planner.core.types import Province

PROVINCES = (
    Province('10', 'Bangkok'),
    Province('11', 'Samut Prakan'),
    Province('12', 'Nonthaburi'),
    Province('13', 'Pathum Thani'),
    Province('14', 'Phra Nakhon Si Ayutthaya'),
    Province('15', 'Ang Thong'),
    Province('16', 'Lopburi'),
    Province('17', 'Sing Buri'),
    Province('18', 'Chai Nat'),
    Province('19', 'Saraburi'),
    Province('20', 'Chonburi'),
    Province('21', 'Rayong'),
    Province('22', 'Chanthaburi'),
    Province('23', 'Trat'),
    Province('24', 'Chachoengsao'),
    Province('25', 'Prachinburi'),
    Province('26', 'Nakhon Nayok'),
    Province('27', 'Sa Kaeo'),
    Province('30', 'Nakhon Ratchasima'),
    Province('31', 'Buriram'),
    Province('32', 'Surin'),
    Province('33', 'Sisaket'),
    Province('34', 'Ubon Ratchathani'),
    Province('35', 'Yasothon'),
    Province('36', 'Chaiyaphum'),
    Province('37', 'Amnat Charoen'),
    Province('38', 'Bueng Kan'),
    Province('39', 'Nong Bua Lamphu'),
    Province('40', 'Khon Kaen'),
    Province('41', 'Udon Thani'),
    Province('42', 'Loei'),
    Province('43', 'Nong Khai'),
    Province('44', 'Maha Sarakham'),
    Province('45', 'Roi Et'),
    Province('46', 'Kalasin'),
    Province('47', 'Sakon Nakhon'),
    Province('48', 'Nakhon Phanom'),
    Province('49', 'Mukdahan'),
    Province('50', 'Chiang Mai'),
    Province('51', 'Lamphun'),
    Province('52', 'Lampang'),
    Province('53', 'Uttaradit'),
    Province('54', 'Phrae'),
    Province('55', 'Nan'),
    Province('56', 'Phayao'),
    Province('57', 'Chiang Rai'),
    Province('58', 'Mae Hong Son'),
    Province('60', 'Nakhon Sawan'),
    Province('61', 'Uthai Thani'),
    Province('62', 'Kamphaeng Phet'),
    Province('63', 'Tak'),
    Province('64', 'Sukhothai'),
    Province('65', 'Phitsanulok'),
    Province('66', 'Phichit'),
    Province('67', 'Phetchabun'),
    Province('70', 'Ratchaburi'),
    Province('71', 'Kanchanaburi'),
    Province('72', 'Suphan Buri'),
    Province('73', 'Nakhon Pathom'),
    Province('74', 'Samut Sakhon'),
    Province('75', 'Samut Songkhram'),
    Province('76', 'Phetchaburi'),
    Province('77', 'Prachuap Khiri Khan'),
    Province('80', 'Nakhon Si Thammarat'),
    Province('81', 'Krabi'),
    Province('82', 'Phang Nga'),
    Province('83', 'Phuket'),
    Province('84', 'Surat Thani'),
    Province('85', 'Ranong'),
    Province('86', 'Chumphon'),
    Province('90', 'Songkhla'),
    Province('91', 'Satun'),
    Province('92', 'Trang'),
    Province('93', 'Phatthalung'),
    Province('94', 'Pattani'),
    Province('95', 'Yala'),
    Province('96', 'Narathiwat'),
)

PROVINCES_BY_CODE: Dict[str, Province] = {province.code: province for province in PROVINCES}


def get_province(code: Optional[str]) -> Optional[Province]:
    """Look up a province by area code; returns None for unknown codes."""
    if code is None:
        return None
    return PROVINCES_BY_CODE.get(str(code).strip())


def is_known_area_code(code: Optional[str]) -> bool:
    return get_province(code) is not None

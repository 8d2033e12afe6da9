"""Enumerations shared by the Loco tools and service."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Locales supported by Loco (GraphQL ``LanguageEnum``)."""

    CS_CZ = "cs_CZ"
    SK_SK = "sk_SK"
    PL_PL = "pl_PL"
    DE_DE = "de_DE"
    EN_US = "en_US"
    EN_GB = "en_GB"
    FR_FR = "fr_FR"
    ES_ES = "es_ES"
    IT_IT = "it_IT"
    HU_HU = "hu_HU"
    RO_RO = "ro_RO"
    BG_BG = "bg_BG"
    HR_HR = "hr_HR"
    SL_SI = "sl_SI"
    SR_RS = "sr_RS"
    UK_UA = "uk_UA"
    RU_RU = "ru_RU"
    NL_NL = "nl_NL"
    PT_PT = "pt_PT"
    PT_BR = "pt_BR"
    DA_DK = "da_DK"
    SV_SE = "sv_SE"
    NB_NO = "nb_NO"
    FI_FI = "fi_FI"
    ET_EE = "et_EE"
    LV_LV = "lv_LV"
    LT_LT = "lt_LT"
    EL_GR = "el_GR"
    TR_TR = "tr_TR"
    JA_JP = "ja_JP"
    ZH_CN = "zh_CN"
    KO_KR = "ko_KR"
    AR_SA = "ar_SA"
    HE_IL = "he_IL"

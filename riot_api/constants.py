"""Riot API constants and enum definitions."""

from enum import Enum


class Region(str, Enum):
    """Platform hosts the API is served from."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    TR1 = "tr1"
    RU = "ru"
    PBE1 = "pbe1"


class Queue(str, Enum):
    """Ranked queues used by the league endpoints."""

    RANKED_SOLO_5X5 = "RANKED_SOLO_5x5"
    RANKED_FLEX_SR = "RANKED_FLEX_SR"
    RANKED_FLEX_TT = "RANKED_FLEX_TT"


class Tier(str, Enum):
    """Ranked tiers that have divisions."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    DIAMOND = "DIAMOND"


class Division(str, Enum):
    """Divisions within a tier."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"


class PickType(str, Enum):
    """Tournament pick types."""

    BLIND_PICK = "BLIND_PICK"
    DRAFT_MODE = "DRAFT_MODE"
    ALL_RANDOM = "ALL_RANDOM"
    TOURNAMENT_DRAFT = "TOURNAMENT_DRAFT"


class MapType(str, Enum):
    """Tournament map types."""

    SUMMONERS_RIFT = "SUMMONERS_RIFT"
    TWISTED_TREELINE = "TWISTED_TREELINE"
    HOWLING_ABYSS = "HOWLING_ABYSS"


class SpectatorType(str, Enum):
    """Who may spectate a tournament game."""

    NONE = "NONE"
    LOBBYONLY = "LOBBYONLY"
    ALL = "ALL"


class QueueType(int, Enum):
    """Queue IDs for match filtering."""

    # Ranked queues
    RANKED_SOLO_5X5 = 420
    RANKED_FLEX_5X5 = 440
    RANKED_FLEX_3X3 = 470

    # Normal queues
    NORMAL_DRAFT_5X5 = 400
    NORMAL_BLIND_PICK_5X5 = 430
    NORMAL_BLIND_PICK_3X3 = 460
    ARAM = 450

    # Event/Rotation queues
    ONE_FOR_ALL = 1020
    URF = 900
    NEXUS_BLITZ = 1300

    # Bots
    COOP_VS_AI_INTRO = 830
    COOP_VS_AI_BEGINNER = 840
    COOP_VS_AI_INTERMEDIATE = 850

"""Default override table for the League of Legends API reference page."""

from __future__ import annotations

from lol_api_doc.domain.enums import PrimitiveKind

from .registry import OperationPatch, OverrideRegistry, RegistryBuilder, resource_patch

DEFAULT_PATCHES = {
    "lol-static-data": resource_patch(
        operations={
            "/champion": "Champions",
            "/champion/{id}": "Champion",
            "/item": "Items",
            "/item/{id}": "Item",
            "/language-strings": "LanguageStrings",
            "/languages": "Languages",
            "/map": "Maps",
            "/mastery": "Masteries",
            "/mastery/{id}": "Mastery",
            "/realm": "Realm",
            "/rune": "Runes",
            "/rune/{id}": "Rune",
            "/summoner-spell": "SummonerSpells",
            "/summoner-spell/{id}": "SummonerSpell",
            "versions": "Versions",
        },
        classes={
            "ImageDto": "Image",
            "ChampionDto": "Champion",
            "ChampionListDto": "Champions",
            "MapDetailsDto": "Map",
            "MapDataDto": "Maps",
            "ChampionSpellDto": "ChampionSpell",
            "SummonerSpellDto": "SummonerSpell",
            "SummonerSpellListDto": "SummonerSpells",
            "ItemDto": "Item",
            "ItemListDto": "Items",
            "GoldDto": "Gold",
            "StatsDto": "ChampionStats",
            "GroupDto": "ItemGroup",
            "InfoDto": "ChampionInfo",
            "SkinDto": "Skin",
            "RecommendedDto": "Recommended",
            "BlockDto": "RecommendedBlock",
            "BlockItemDto": "RecommendedItems",
            "ItemTreeDto": "ItemTree",
            "MasteryDto": "Mastery",
            "MasteryListDto": "Masteries",
            "MasteryTreeItemDto": "MasteryTreeItem",
            "MasteryTreeDto": "MasteryTree",
            "MasteryTreeListDto": "MasteryTrees",
            "RuneDto": "Rune",
            "RuneListDto": "Runes",
            "MetaDataDto": "RuneMetadata",
            "PassiveDto": "Passive",
            "SpellVarsDto": "SpellVars",
            "BasicDataDto": "BasicData",
            "BasicDataStatsDto": "BasicStats",
            "LanguageStringsDto": "LanguageStrings",
            "LevelTipDto": "LevelTip",
            "RealmDto": "Realm",
        },
    ),
    "champion": resource_patch(
        operations={
            "/champion": "ChampionStatuses",
            "/champion/{id}": "ChampionStatus",
        },
        classes={
            "ChampionDto": "ChampionStatus",
            "ChampionListDto": "ChampionStatuses",
        },
    ),
    "current-game": resource_patch(
        operations={
            "/getSpectatorGameInfo/{platformId}/{summonerId}": "SpectatorGameInfo",
        },
        classes={
            "BannedChampion": "CurrentGameBannedChampion",
            "Rune": "CurrentGameRune",
            "Mastery": "CurrentGameMastery",
            "CurrentGameInfo": "CurrentGameInfo",
            "CurrentGameParticipant": "CurrentGameParticipant",
            "Observer": "CurrentGameObserver",
        },
    ),
    "featured-games": resource_patch(
        operations={
            "/featured": "FeaturedGames",
        },
        classes={
            "BannedChampion": "FeaturedGameBannedChampion",
            "Participant": "FeaturedGameParticipant",
            "Rune": "FeaturedGameRune",
            "Mastery": "FeaturedGameMastery",
            "Observer": "FeaturedGameObserver",
            "FeaturedGames": "FeaturedGames",
            "FeaturedGameInfo": "FeaturedGameInfo",
        },
    ),
    "game": resource_patch(
        operations={
            "/game/by-summoner/{summonerId}/recent": "RecentGames",
        },
        classes={
            "GameDto": "Game",
            "RecentGamesDto": "RecentGames",
            "RawStatsDto": "GamePlayerRawStats",
            "PlayerDto": "GamePlayer",
        },
    ),
    "league": resource_patch(
        operations={
            "/league/by-summoner/{summonerIds}": "LeaguesBySummonerID",
            "/league/by-summoner/{summonerIds}/entry": "LeagueEntriesBySummonerID",
            "/league/by-team/{teamIds}": "LeaguesByTeamID",
            "/league/by-team/{teamIds}/entry": "LeagueEntriesByTeamID",
            "/league/challenger": "Challenger",
            "/league/master": "Master",
        },
        classes={
            "MiniSeriesDto": "MiniSeries",
            "LeagueEntryDto": "LeagueEntry",
            "LeagueDto": "League",
        },
    ),
    "lol-status": resource_patch(
        operations={
            "/shards": "Shards",
            "/shards/{region}": "ShardsInRegion",
            "/shards/{shard}": "Shard",
        },
        classes={
            "Shard": "Shard",
            "ShardStatus": "ShardStatus",
            "Service": "Service",
            "Message": "StatusMessage",
            "Translation": "StatusMessageTranslation",
            "Incident": "Incident",
        },
    ),
    "match": resource_patch(
        operations={
            "/match/{matchId}": "Match",
            "/match/by-tournament/{tournamentCode}/ids": "MatchesByTournament",
            "/match/for-tournament/{matchId}": "MatchForTournament",
        },
        classes={
            "BannedChampion": "BannedChampion",
            "Timeline": "Timeline",
            "Frame": "Frame",
            "Event": "Event",
            "Position": "Position",
            "Team": "MatchTeam",
            "Participant": "Participant",
            "ParticipantStats": "ParticipantStats",
            "ParticipantIdentity": "ParticipantIdentity",
            "ParticipantFrame": "ParticipantFrame",
            "ParticipantStatus": "ParticipantStatus",
            "ParticipantTimeline": "ParticipantTimeline",
            "ParticipantTimelineData": "ParticipantTimelineData",
            "Player": "Player",
            "Mastery": "UsedMastery",
            "Rune": "UsedRune",
            "MatchDetail": "MatchDetail",
        },
    ),
    "matchlist": resource_patch(
        operations={
            "/matchlist/by-summoner/{summonerId}": "MatchesBySummonerID",
        },
        classes={
            "MatchList": "Matches",
            "MatchReference": "MatchRef",
        },
    ),
    "stats": resource_patch(
        operations={
            "/stats/by-summoner/{summonerId}/ranked": "RankedStats",
            "/stats/by-summoner/{summonerId}/summary": "StatsSummary",
        },
        classes={
            "RankedStatsDto": "RankedStats",
            "PlayerStatsSummaryDto": "PlayerStatsSummary",
            "PlayerStatsSummaryListDto": "PlayerStatsSummaries",
            "AggregatedStatsDto": "AggregatedStats",
            "ChampionStatsDto": "PlayerChampionStats",
        },
    ),
    "summoner": resource_patch(
        operations={
            "/summoner/by-name/{summonerNames}": "SummonersByName",
            "/summoner/{summonerIds}": OperationPatch("Summoners", PrimitiveKind.INT64),
            "/summoner/{summonerIds}/masteries": OperationPatch("MasteryPages", PrimitiveKind.INT64),
            "/summoner/{summonerIds}/name": OperationPatch("SummonerNames", PrimitiveKind.INT64),
            "/summoner/{summonerIds}/runes": OperationPatch("RunePages", PrimitiveKind.INT64),
        },
        classes={
            "MasteryDto": "EquippedMastery",
            "MasteryPageDto": "MasteryPage",
            "MasteryPagesDto": "MasteryPages",
            "RuneSlotDto": "RuneSlot",
            "RunePageDto": "RunePage",
            "RunePagesDto": "RunePages",
            "SummonerDto": "Summoner",
        },
    ),
    "team": resource_patch(
        operations={
            "/team/by-summoner/{summonerIds}": OperationPatch("TeamsBySummonerID", PrimitiveKind.INT64),
            "/team/{teamIds}": "Teams",
        },
        classes={
            "TeamDto": "Team",
            "MatchHistorySummaryDto": "TeamMatchHistorySummary",
            "TeamStatDetailDto": "TeamStatDetails",
            "TeamMemberInfoDto": "TeamMemberInfo",
            "RosterDto": "TeamRoster",
        },
    ),
    "championmastery": resource_patch(
        operations={
            "/championmastery/location/{platformId}/player/{playerId}/champion/{championId}": "ChampionMastery",
            "/championmastery/location/{platformId}/player/{playerId}/champions": "ChampionMasteries",
            "/championmastery/location/{platformId}/player/{playerId}/score": "ChampionMasteryScore",
            "/championmastery/location/{platformId}/player/{playerId}/topchampions": "TopChampions",
        },
        classes={
            "ChampionMasteryDTO": "ChampionMastery",
        },
    ),
}


def default_registry() -> OverrideRegistry:
    builder = RegistryBuilder()
    for resource_id, patch in DEFAULT_PATCHES.items():
        builder.add(resource_id, patch)
    return builder.build()

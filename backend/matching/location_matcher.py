"""
Location matching: geographic and work-arrangement compatibility.

Coordinates come from the location record when present, otherwise from the
injected LocationResolver. An unresolvable location yields a zero-scored
result with an explanatory note rather than an error.
"""
import math
from typing import List, Optional, Tuple

from config.logging_config import RankingLogger
from config.settings import LocationScoringConfig
from core.scoring import clamp_score, round_half_up
from models.base import MarketSize, RiskLevel, TransportationMode, WorkArrangement
from models.location import Location, LocationPreference
from models.project import ProjectRequirements
from models.results import LocationMatchResult, NearbyPlace, RegionalMarketScore
from models.talent import TalentProfile
from .base import CandidateMatcher
from .location_resolver import LocationResolver, ResolvedPlace, StaticLocationResolver

EARTH_RADIUS_KM = 6371.0
UNRESOLVED_NOTE = "Unable to calculate distance - location coordinates not available"


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def check_work_arrangement_compatibility(
    project_arrangement: WorkArrangement,
    talent_preference: Optional[WorkArrangement],
    distance: float,
    onsite_hybrid_max_km: float = 50.0
) -> bool:
    """Whether a talent's preferred arrangement can work with the project's."""
    if talent_preference is None:
        return True
    if project_arrangement == talent_preference:
        return True
    if talent_preference == WorkArrangement.REMOTE:
        return True
    if project_arrangement == WorkArrangement.REMOTE:
        return talent_preference == WorkArrangement.HYBRID
    if project_arrangement == WorkArrangement.HYBRID:
        return talent_preference == WorkArrangement.ONSITE
    # onsite project, hybrid talent
    return distance <= onsite_hybrid_max_km


class LocationMatcher(CandidateMatcher[LocationMatchResult]):
    """Scores geographic and work-arrangement compatibility."""

    name = "location"

    def __init__(self, resolver: Optional[LocationResolver] = None,
                 config: Optional[LocationScoringConfig] = None,
                 logger: Optional[RankingLogger] = None):
        self.resolver = resolver or StaticLocationResolver()
        self.config = config or LocationScoringConfig()
        self.logger = logger or RankingLogger()

    def evaluate(self, talent: TalentProfile, project: ProjectRequirements) -> LocationMatchResult:
        return self.match(talent.location, project.location, project.location_preferences, talent.preferences)

    def _coordinates(self, location: Location) -> Optional[Tuple[float, float]]:
        if location.has_coordinates:
            return location.latitude, location.longitude
        place = self.resolver.resolve(location.city)
        if place is None:
            self.logger.log_location_unresolved(location.city)
            return None
        return place.latitude, place.longitude

    def estimate_travel_time(self, distance: float, mode: TransportationMode) -> int:
        """Estimated door-to-door minutes for a distance and mode."""
        speed = self.config.speeds_kmh[mode.value]
        buffer = self.config.travel_buffers[mode.value]
        return round_half_up(distance / speed * 60 * buffer)

    def transportation_mode(self, distance: float, project_place: Optional[ResolvedPlace]) -> TransportationMode:
        if distance <= self.config.walking_max_km:
            return TransportationMode.WALKING
        if distance <= self.config.transit_max_km and project_place is not None and project_place.is_transit_hub:
            return TransportationMode.TRANSIT
        return TransportationMode.DRIVING

    def match(
        self,
        talent_location: Location,
        project_location: Location,
        project_preferences: LocationPreference,
        talent_preferences: Optional[LocationPreference] = None
    ) -> LocationMatchResult:
        """
        Score how well the talent's location suits the project.

        Args:
            talent_location: Where the talent is based
            project_location: Where the project is based
            project_preferences: Radius and arrangement the project asks for
            talent_preferences: Optional arrangement the talent prefers

        Returns:
            Location match result; zero-scored when either side is unresolvable
        """
        talent_coords = self._coordinates(talent_location)
        project_coords = self._coordinates(project_location)

        if talent_coords is None or project_coords is None:
            return LocationMatchResult(
                distance=0,
                match_score=0,
                is_within_radius=False,
                transportation_mode=TransportationMode.DRIVING,
                work_arrangement_compatible=False,
                recommendations=[UNRESOLVED_NOTE]
            )

        cfg = self.config
        recommendations: List[str] = []
        distance = haversine_distance(*talent_coords, *project_coords)
        max_radius = project_preferences.max_radius
        is_within_radius = distance <= max_radius

        talent_place = self.resolver.resolve(talent_location.city)
        project_place = self.resolver.resolve(project_location.city)
        mode = self.transportation_mode(distance, project_place)
        travel_time = self.estimate_travel_time(distance, mode)

        talent_arrangement = talent_preferences.work_arrangement if talent_preferences else None
        arrangement_compatible = check_work_arrangement_compatibility(
            project_preferences.work_arrangement, talent_arrangement, distance, cfg.onsite_hybrid_max_km
        )

        score = 0.0

        # Distance banding
        score += self._distance_points(distance, recommendations)

        # Radius compliance
        if is_within_radius:
            score += 25
            recommendations.append("✓ Within specified radius")
        else:
            overage_percentage = (distance - max_radius) / max_radius * 100 if max_radius > 0 else math.inf
            if overage_percentage <= 20:
                score += 20
                recommendations.append("Slightly outside radius but close")
            elif overage_percentage <= 50:
                score += 15
                recommendations.append("Outside radius - may require flexibility")
            else:
                score += 5
                recommendations.append("Significantly outside specified radius")

        # Work arrangement
        if arrangement_compatible:
            score += 25
            recommendations.append("✓ Work arrangement preferences align")
        else:
            score += 10
            recommendations.append("Work arrangement may need adjustment")

        # Travel time
        if travel_time <= 30:
            score += 10
            recommendations.append(f"✓ Short travel time: {travel_time} minutes")
        elif travel_time <= 60:
            score += 7
            recommendations.append(f"Reasonable travel time: {travel_time} minutes")
        elif travel_time <= 90:
            score += 5
            recommendations.append(f"Longer travel time: {travel_time} minutes")
        else:
            score += 2
            recommendations.append(f"Extended travel time: {travel_time} minutes")

        if (talent_place is not None and project_place is not None
                and talent_place.region and talent_place.region == project_place.region):
            score += cfg.regional_bonus
            recommendations.append(f"✓ Both locations in {talent_place.region} region")

        if talent_location.city.strip().lower() == project_location.city.strip().lower():
            score += cfg.same_city_bonus
            recommendations.append("✓ Same city - local market knowledge")

        return LocationMatchResult(
            distance=round(distance, 1),
            match_score=round_half_up(clamp_score(score)),
            is_within_radius=is_within_radius,
            travel_time=travel_time,
            transportation_mode=mode,
            work_arrangement_compatible=arrangement_compatible,
            recommendations=recommendations
        )

    def _distance_points(self, distance: float, recommendations: List[str]) -> int:
        messages = [
            "✓ Same city location - no commute required",
            "✓ Very close proximity - short commute",
            "✓ Close proximity - reasonable commute",
            "Moderate distance - manageable commute",
            "Longer commute but within reasonable range",
            "Significant commute - consider hybrid arrangement",
            "Long distance - remote work strongly recommended",
        ]
        for (upper, points), message in zip(self.config.distance_bands, messages):
            if distance <= upper:
                recommendations.append(message)
                return int(points)
        recommendations.append("Very long distance - remote work essential")
        return self.config.beyond_distance_points

    def nearby_places(self, center: Location, radius_km: float) -> List[NearbyPlace]:
        """Known places within radius_km of center, nearest first, excluding the center itself."""
        center_coords = self._coordinates(center)
        if center_coords is None:
            return []

        nearby = []
        for place in self.resolver.places():
            distance = haversine_distance(*center_coords, place.latitude, place.longitude)
            if 0 < distance <= radius_km:
                nearby.append(NearbyPlace(
                    city=place.name,
                    distance=round(distance, 1),
                    population=place.population
                ))
        return sorted(nearby, key=lambda p: p.distance)

    def regional_market_score(self, talent_location: Location,
                              project_location: Location) -> RegionalMarketScore:
        """Size and competitiveness of the project's local market."""
        talent_place = self.resolver.resolve(talent_location.city)
        project_place = self.resolver.resolve(project_location.city)

        if talent_place is None or project_place is None:
            return RegionalMarketScore(
                market_score=0,
                market_size=MarketSize.SMALL,
                competition_level=RiskLevel.LOW,
                recommendations=["Location data not available for market analysis"]
            )

        recommendations = []
        score = 50

        if project_place.population > 100000:
            market_size = MarketSize.LARGE
            score += 20
            recommendations.append("Large market with diverse opportunities")
        elif project_place.population > 30000:
            market_size = MarketSize.MEDIUM
            score += 15
            recommendations.append("Medium-sized market with good potential")
        else:
            market_size = MarketSize.SMALL
            score += 10
            recommendations.append("Smaller market - may have niche opportunities")

        if market_size == MarketSize.LARGE:
            competition = RiskLevel.HIGH
            recommendations.append("Higher competition but more opportunities")
        elif market_size == MarketSize.MEDIUM:
            competition = RiskLevel.MEDIUM
            recommendations.append("Moderate competition level")
        else:
            competition = RiskLevel.LOW
            score += 10
            recommendations.append("Lower competition - good for local specialists")

        if project_place.is_transit_hub:
            score += 15
            recommendations.append("Regional hub location - good business ecosystem")

        return RegionalMarketScore(
            market_score=min(100, score),
            market_size=market_size,
            competition_level=competition,
            recommendations=recommendations
        )

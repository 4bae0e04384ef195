"""
Catalog queries used by the moments worker.

Provides:
- Counts: number of indexed photos and videos
- Moment: an aggregated candidate for a new album
- One query per moment dimension (folders, months, countries, states, labels)

Each query takes a minimum photo count and returns candidates ordered by
descending count. Database errors propagate as SQLAlchemyError.
"""
from dataclasses import dataclass
from datetime import date

from photomoments import db
from photomoments.models import Photo, Label, MediaType, photo_labels, UNKNOWN_COUNTRY
from photomoments.lib.convert import country_code, year_from, is_uint, YEAR_MAX
from photomoments.lib.countries import country_name
from photomoments.lib.text import slugify, title_case
from photomoments.lib.timestamp import time_from_string

# Labels that make good moments, mapped to the album title. Labels sharing a
# title end up in the same album.
MOMENT_LABELS = {
    'beach': 'Beach',
    'seashore': 'Beach',
    'sand': 'Beach',
    'sunset': 'Sunset',
    'sunrise': 'Sunrise',
    'mountain': 'Mountains',
    'mountains': 'Mountains',
    'alps': 'Mountains',
    'hill': 'Mountains',
    'lake': 'Water',
    'river': 'Water',
    'waterfall': 'Water',
    'snow': 'Snow',
    'glacier': 'Snow',
    'forest': 'Forest',
    'tree': 'Forest',
    'desert': 'Desert',
    'island': 'Islands',
    'festival': 'Festival',
    'concert': 'Festival',
    'wedding': 'Wedding',
    'birthday': 'Birthday',
    'party': 'Party',
    'christmas': 'Christmas',
    'fireworks': 'Fireworks',
    'airport': 'Travel',
    'airplane': 'Travel',
    'train': 'Travel',
    'car': 'Cars',
    'vehicle': 'Cars',
    'cat': 'Cats',
    'dog': 'Dogs',
    'bird': 'Birds',
    'animal': 'Animals',
    'food': 'Food',
    'restaurant': 'Food',
    'architecture': 'Architecture',
    'building': 'Architecture',
    'church': 'Architecture',
    'castle': 'Castles',
    'museum': 'Museums',
    'garden': 'Gardens',
    'flower': 'Flowers',
    'nature': 'Nature',
    'landscape': 'Nature',
    'sport': 'Sports',
    'swimming': 'Sports',
}


@dataclass
class Counts:
    """Number of photos and videos in the catalog, excluding deleted entries."""
    photos: int = 0
    videos: int = 0

    @property
    def index_size(self) -> int:
        return self.photos + self.videos

    def refresh(self) -> "Counts":
        rows = db.session.execute(
            db.select(Photo.media_type, db.func.count(Photo.id))
            .where(Photo.deleted_at.is_(None))
            .group_by(Photo.media_type)
        ).all()

        self.photos = 0
        self.videos = 0
        for media_type, count in rows:
            if media_type == MediaType.VIDEO:
                self.videos = count
            else:
                self.photos += count

        return self


@dataclass
class Moment:
    """Candidate album produced by a moment query."""
    path: str = ''
    year: int = 0
    month: int = 0
    country: str = ''
    state: str = ''
    label: str = ''
    photo_count: int = 0

    def title(self) -> str:
        if self.path:
            return _folder_title(self.path, self.year, self.month)

        if self.year == 0 and self.month == 0:
            if self.label:
                return MOMENT_LABELS.get(self.label, title_case(self.label))

            country = country_name(self.country)
            if not self.state:
                return country
            if country in self.state:
                return self.state
            return f"{self.state} / {country}"

        if self.country and self.year > 1900 and self.month == 0:
            if self.state:
                return f"{self.state} / {country_name(self.country)} / {self.year}"
            return f"{country_name(self.country)} {self.year}"

        if self.year > 1900 and 1 <= self.month <= 12:
            period = date(self.year, self.month, 1).strftime('%B %Y')
            if not self.country:
                return period
            return f"{country_name(self.country)} / {period}"

        return 'Unknown'

    def slug(self) -> str:
        if self.path:
            return slugify(self.path)
        if self.state:
            return slugify(f"{self.country}-{self.state}")
        # Country names repeat for unmapped codes, the code itself does not
        if self.country and self.year:
            parts = [self.country, str(self.year)]
            if self.month:
                parts.append(str(self.month))
            return slugify('-'.join(parts))
        return slugify(self.title())


def _folder_title(path: str, year: int, month: int) -> str:
    name = path.rstrip('/').rsplit('/', 1)[-1]

    # Plain number folders like "2019/07" read better as a period
    if is_uint(name) and year and month:
        return date(year, month, 1).strftime('%B %Y')

    return title_case(name) or path


def _folder_moment(path: str, photo_count: int) -> Moment:
    """Derive year, month and country from the folder path."""
    year = year_from(path)
    month = 0

    taken = time_from_string(path)
    if taken is not None and year and taken.year == year:
        month = taken.month

    country = country_code(path)
    if country == UNKNOWN_COUNTRY:
        country = ''

    return Moment(path=path, year=year, month=month, country=country, photo_count=photo_count)


def album_folders(threshold: int) -> list[Moment]:
    """Folders that contain at least `threshold` photos."""
    photo_count = db.func.count(Photo.id).label('photo_count')
    stmt = (
        db.select(Photo.photo_path, photo_count)
        .where(Photo.deleted_at.is_(None), Photo.photo_path != '')
        .group_by(Photo.photo_path)
        .having(db.func.count(Photo.id) >= threshold)
        .order_by(photo_count.desc(), Photo.photo_path)
    )

    return [_folder_moment(row.photo_path, row.photo_count) for row in db.session.execute(stmt)]


def moments_time(threshold: int) -> list[Moment]:
    """Year and month combinations with at least `threshold` photos."""
    photo_count = db.func.count(Photo.id).label('photo_count')
    stmt = (
        db.select(Photo.photo_year, Photo.photo_month, photo_count)
        .where(Photo.deleted_at.is_(None), Photo.photo_year > 0, Photo.photo_year <= YEAR_MAX,
               Photo.photo_month >= 1, Photo.photo_month <= 12)
        .group_by(Photo.photo_year, Photo.photo_month)
        .having(db.func.count(Photo.id) >= threshold)
        .order_by(photo_count.desc(), Photo.photo_year, Photo.photo_month)
    )

    return [
        Moment(year=row.photo_year, month=row.photo_month, photo_count=row.photo_count)
        for row in db.session.execute(stmt)
    ]


def moments_countries(threshold: int) -> list[Moment]:
    """Countries per year with at least `threshold` photos."""
    photo_count = db.func.count(Photo.id).label('photo_count')
    stmt = (
        db.select(Photo.photo_country, Photo.photo_year, photo_count)
        .where(Photo.deleted_at.is_(None), Photo.photo_country != UNKNOWN_COUNTRY,
               Photo.photo_country != '', Photo.photo_year > 0,
               Photo.photo_year <= YEAR_MAX)
        .group_by(Photo.photo_country, Photo.photo_year)
        .having(db.func.count(Photo.id) >= threshold)
        .order_by(photo_count.desc(), Photo.photo_country, Photo.photo_year)
    )

    return [
        Moment(country=row.photo_country, year=row.photo_year, photo_count=row.photo_count)
        for row in db.session.execute(stmt)
    ]


def moments_states(threshold: int) -> list[Moment]:
    """States and regions with at least `threshold` photos."""
    photo_count = db.func.count(Photo.id).label('photo_count')
    stmt = (
        db.select(Photo.photo_country, Photo.photo_state, photo_count)
        .where(Photo.deleted_at.is_(None), Photo.photo_country != UNKNOWN_COUNTRY,
               Photo.photo_country != '', Photo.photo_state != '')
        .group_by(Photo.photo_country, Photo.photo_state)
        .having(db.func.count(Photo.id) >= threshold)
        .order_by(photo_count.desc(), Photo.photo_country, Photo.photo_state)
    )

    return [
        Moment(country=row.photo_country, state=row.photo_state, photo_count=row.photo_count)
        for row in db.session.execute(stmt)
    ]


def moments_labels(threshold: int) -> list[Moment]:
    """Moment labels attached to at least `threshold` photos."""
    photo_count = db.func.count(Photo.id).label('photo_count')
    stmt = (
        db.select(Label.label_slug, photo_count)
        .join(photo_labels, photo_labels.c.label_id == Label.id)
        .join(Photo, Photo.id == photo_labels.c.photo_id)
        .where(Photo.deleted_at.is_(None), Label.label_slug.in_(list(MOMENT_LABELS)))
        .group_by(Label.label_slug)
        .having(db.func.count(Photo.id) >= threshold)
        .order_by(photo_count.desc(), Label.label_slug)
    )

    return [
        Moment(label=row.label_slug, photo_count=row.photo_count)
        for row in db.session.execute(stmt)
    ]

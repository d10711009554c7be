from enum import StrEnum


class TaskType(StrEnum):
    SINGLE_ASSET = "single_asset"
    MULTI_ASSET_PLAN = "multi_asset_plan"
    CAMPAIGN = "campaign"


class Intent(StrEnum):
    SIGNUPS = "signups"
    AUTHORITY = "authority"
    AWARENESS = "awareness"
    SALES = "sales"
    ENGAGEMENT = "engagement"
    EDUCATION = "education"
    ANNOUNCEMENT = "announcement"


class Platform(StrEnum):
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    FACEBOOK = "facebook"
    TWITTER = "twitter"
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    PRINT = "print"
    WEB = "web"
    EMAIL = "email"
    PRESENTATION = "presentation"


class ContentType(StrEnum):
    POST = "post"
    STORY = "story"
    REEL = "reel"
    CAROUSEL = "carousel"
    BANNER = "banner"
    AD = "ad"
    THUMBNAIL = "thumbnail"
    SLIDE = "slide"
    FLYER = "flyer"
    POSTER = "poster"
    VIDEO = "video"


PLATFORM_NAMES: dict[Platform, str] = {
    Platform.INSTAGRAM: "Instagram",
    Platform.LINKEDIN: "LinkedIn",
    Platform.FACEBOOK: "Facebook",
    Platform.TWITTER: "Twitter/X",
    Platform.YOUTUBE: "YouTube",
    Platform.TIKTOK: "TikTok",
    Platform.PRINT: "Print",
    Platform.WEB: "Web",
    Platform.EMAIL: "Email",
    Platform.PRESENTATION: "Presentation",
}

CONTENT_TYPE_NAMES: dict[ContentType, str] = {
    ContentType.POST: "Post",
    ContentType.STORY: "Story",
    ContentType.REEL: "Reel",
    ContentType.CAROUSEL: "Carousel",
    ContentType.BANNER: "Banner",
    ContentType.AD: "Ad",
    ContentType.THUMBNAIL: "Thumbnail",
    ContentType.SLIDE: "Slide",
    ContentType.FLYER: "Flyer",
    ContentType.POSTER: "Poster",
    ContentType.VIDEO: "Video",
}

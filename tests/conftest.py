import pytest

SAMPLE_BEATMAP = """osu file format v14

[General]
AudioFilename: audio.mp3
AudioLeadIn: 0
PreviewTime: 45000
Countdown: 0
SampleSet: Soft
StackLeniency: 0.7
Mode: 0
LetterboxInBreaks: 1
WidescreenStoryboard: 1

[Editor]
Bookmarks: 1000,2000
DistanceSpacing: 1.2
BeatDivisor: 4

[Metadata]
Title:Example Song
TitleUnicode:Example Song (Unicode)
Artist:Example Artist
Creator:mapper
Version:Insane
Source:Some Game
Tags:tag1 tag2  tag3
BeatmapID:123456
BeatmapSetID:65432

[Difficulty]
HPDrainRate:5
CircleSize:4
OverallDifficulty:8
ApproachRate:9
SliderMultiplier:1.8
SliderTickRate:1

[Events]
//Background and Video events
Video,0,"bg.mp4"
0,0,"background.jpg",0,0
//Break Periods
2,50000,60000

[TimingPoints]
66,333.333,4,2,1,60,1,0
5000,-50,4,2,1,60,0,1

[Colours]
Combo1 : 255,128,0

[HitObjects]
256,192,66,5,0,0:0:0:0:
424,96,66,2,0,B|380:120|332:96|332:96|304:124,1,130,2|0,0:0|0:0,0:0:0:0:
256,192,8000,12,0,9000,0:0:0:0:
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_BEATMAP

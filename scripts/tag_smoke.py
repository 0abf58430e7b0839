from transcript_tagger.intelligence.tagger import Tagger, tag_transcript
from transcript_tagger.intelligence.categorize import categorize_note

SAMPLES = [
    "What if we brainstorm a concept for the new project? I've been thinking about this idea all week.",
    "I need to remember to email the client by tomorrow. Don't forget the presentation for the team meeting.",
    "Today was a good day. I feel grateful for my family. We had dinner together and the kids were happy.",
    "Remind me about the doctor appointment at 3 o'clock p.m. by Friday.",
    "I have to schedule a gym workout and grocery run this weekend. Must make sure to pick up the kids by 5 o'clock.",
]


def main():
    tagger = Tagger()
    for edge in (None, "", 42, "the quick brown fox"):
        print(f"{edge!r:24} -> {tag_transcript(edge)}")
    print()

    for text in SAMPLES:
        print("input:", repr(text))
        res = tagger.explain(text)
        print("-" * 50)
        for s in res["scores"]:
            hits = ", ".join(s["matched"]) if s["count"] else ""
            print(f"  {s['category']:<12}{s['count']:>2} hit(s) {hits}")
        print("-" * 50)
        print("  tags:", res["tags"])
        print("  categories:", categorize_note(text))
        print()


if __name__ == "__main__":
    main()

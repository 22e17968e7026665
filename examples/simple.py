import sys

from chord_shapes import generate_from_slash_label, slash_chord_display_info, slash_chord_pitch_classes

# Bass first: E, then A C G
sys.stdout.write(f"{slash_chord_pitch_classes(9, 'm7', 7)}\n")  # [4, 9, 0, 7]

info = slash_chord_display_info("Am7/E")
sys.stdout.write(f"{info.display_name}\n")  # "Cm7/G (5th in bass)"

# Playable shapes, easiest first
for fingering in generate_from_slash_label("C/E"):
    sys.stdout.write(f"{fingering.shape} {fingering.difficulty}\n")

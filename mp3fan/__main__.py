from mp3fan.cli import main

raise SystemExit(main())

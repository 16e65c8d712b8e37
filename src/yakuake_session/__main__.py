from yakuake_session.cli import main

raise SystemExit(main())

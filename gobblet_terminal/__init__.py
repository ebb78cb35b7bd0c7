# Terminal front end for Gobblet Gobblers
